"""Tests for logo image loading."""

import io
from unittest.mock import MagicMock, patch
from urllib.error import URLError

import pytest

from rtldoc.errors import ResourceError
from rtldoc.render.resources import is_remote, load_image


class TestLoadImage:
    """Tests for load_image()."""

    def test_bytes_pass_through(self, png_bytes):
        assert load_image(png_bytes) == png_bytes

    def test_local_path(self, png_bytes, tmp_path):
        path = tmp_path / "logo.png"
        path.write_bytes(png_bytes)

        assert load_image(str(path)) == png_bytes
        assert load_image(path) == png_bytes

    def test_stream(self, png_bytes):
        assert load_image(io.BytesIO(png_bytes)) == png_bytes

    def test_missing_file(self, tmp_path):
        with pytest.raises(ResourceError):
            load_image(tmp_path / "missing.png")

    @patch("rtldoc.render.resources.urllib.request.urlopen")
    def test_remote_url(self, mock_urlopen, png_bytes):
        response = MagicMock()
        response.read.return_value = png_bytes
        mock_urlopen.return_value.__enter__.return_value = response

        assert load_image("https://example.com/logo.png") == png_bytes
        mock_urlopen.assert_called_once_with("https://example.com/logo.png")

    @patch("rtldoc.render.resources.urllib.request.urlopen")
    def test_remote_failure_not_retried(self, mock_urlopen):
        mock_urlopen.side_effect = URLError("down")

        with pytest.raises(ResourceError):
            load_image("http://example.com/logo.png")

        assert mock_urlopen.call_count == 1

    def test_unreadable_object(self):
        with pytest.raises(ResourceError):
            load_image(42)


class TestIsRemote:
    """Tests for URL detection."""

    def test_http(self):
        assert is_remote("http://example.com/a.png")
        assert is_remote("https://example.com/a.png")

    def test_path(self):
        assert not is_remote("/tmp/http.png")
        assert not is_remote("httpdocs/logo.png")
