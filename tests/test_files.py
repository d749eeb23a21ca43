"""Unit tests for the upload gate."""
import pytest
from hypothesis import given
from hypothesis import strategies as st

from gemstudio.errors import UnsupportedFileError
from gemstudio.files import (
    SUPPORTED_EXTENSIONS,
    ensure_supported_file,
    is_supported_file,
    read_dataset,
)


class TestExtensionGate:
    """Tests for the extension check."""

    @pytest.mark.parametrize("name", ["data.csv", "data.json", "data.txt", "data.md"])
    def test_supported_names(self, name):
        """Test that every supported extension is accepted."""
        ensure_supported_file(name)
        assert is_supported_file(name)

    @pytest.mark.parametrize("name", ["data.png", "data.xlsx", "data", "csv", "data.csv.exe"])
    def test_unsupported_names(self, name):
        """Test that other extensions are rejected."""
        assert not is_supported_file(name)
        with pytest.raises(UnsupportedFileError, match="CSV, JSON, TXT, MD"):
            ensure_supported_file(name)

    def test_extension_case_insensitive(self):
        """Test that upper-case extensions are accepted."""
        assert is_supported_file("REPORT.CSV")
        assert is_supported_file("Notes.Md")

    @given(
        st.text(alphabet=st.characters(whitelist_categories=("Ll", "Lu", "Nd")), min_size=1, max_size=12),
        st.sampled_from(sorted(SUPPORTED_EXTENSIONS)),
    )
    def test_any_stem_with_supported_extension(self, stem: str, extension: str):
        """Property test: acceptance depends only on the extension."""
        assert is_supported_file(f"{stem}{extension}")


class TestReadDataset:
    """Tests for read_dataset."""

    def test_reads_text(self, data_dir):
        """Test that a supported file is read as text."""
        assert read_dataset(data_dir / "sales.csv").startswith("month,revenue")

    def test_rejects_before_reading(self, tmp_path):
        """Test that the gate runs before the file is opened."""
        missing = tmp_path / "missing.png"

        with pytest.raises(UnsupportedFileError, match="supported text format"):
            read_dataset(missing)

    def test_missing_file(self, tmp_path):
        """Test that an unreadable supported file is reported."""
        with pytest.raises(UnsupportedFileError, match="Failed to read file"):
            read_dataset(tmp_path / "missing.csv")

    def test_binary_content(self, tmp_path):
        """Test that non-UTF-8 content is reported."""
        path = tmp_path / "binary.txt"
        path.write_bytes(b"\xff\xfe\x00\x81")

        with pytest.raises(UnsupportedFileError, match="Failed to read file"):
            read_dataset(path)
