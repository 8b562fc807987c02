"""Tests for data URI and audio helpers."""

import io
import wave

import pytest

from sahayak.utils.audio import pcm_to_wav, pcm_to_wav_data_uri
from sahayak.utils.data_uri import is_data_uri, parse_data_uri, require_data_uri, to_data_uri


class TestDataUri:
    """Test data URI detection and parsing."""

    @pytest.mark.parametrize("value", [
        "data:image/png;base64,iVBORw0KGgo=",
        "data:audio/L16;codec=pcm;rate=24000;base64,AAAA",
        "data:application/pdf;base64,",
    ])
    def test_valid(self, value):
        """Test valid data URIs are recognized."""
        assert is_data_uri(value)

    @pytest.mark.parametrize("value", [
        "iVBORw0KGgo=",
        "data:;base64,AAAA",
        "data:image/png,rawtext",
        "https://example.com/page.png",
        None,
    ])
    def test_invalid(self, value):
        """Test non data URIs are rejected."""
        assert not is_data_uri(value)

    def test_parse(self):
        """Test parsing MIME type and payload."""
        mime, payload = parse_data_uri(to_data_uri("text/plain", b"hello"))

        assert mime == "text/plain"
        assert payload == b"hello"

    def test_parse_rejects_bad_base64(self):
        """Test invalid base64 payloads."""
        with pytest.raises(ValueError, match="not valid base64"):
            parse_data_uri("data:image/png;base64,@@@")

    def test_require_accepts_payload(self):
        """Test that a decodable, non-empty data URI passes through unchanged."""
        uri = to_data_uri("image/png", b"\x89PNG")

        assert require_data_uri(uri) == uri

    @pytest.mark.parametrize("value,message", [
        ("iVBORw0KGgo=", "must be a data URI"),
        ("data:image/png;base64,@@@", "not valid base64"),
        ("data:image/png;base64,", "payload is empty"),
    ])
    def test_require_rejects(self, value, message):
        """Test that missing prefix, bad base64 and empty payloads are ValueError."""
        with pytest.raises(ValueError, match=message):
            require_data_uri(value)


class TestPcmToWav:
    """Test WAV containerization of speech output."""

    def test_header_matches_speech_format(self):
        """Test WAV header is mono 16-bit 24kHz."""
        pcm = b"\x00\x01" * 2400

        with wave.open(io.BytesIO(pcm_to_wav(pcm)), "rb") as wf:
            assert wf.getnchannels() == 1
            assert wf.getsampwidth() == 2
            assert wf.getframerate() == 24000
            assert wf.readframes(wf.getnframes()) == pcm

    def test_data_uri(self):
        """Test WAV data URI."""
        uri = pcm_to_wav_data_uri(b"\x00\x00" * 10)
        mime, payload = parse_data_uri(uri)

        assert mime == "audio/wav"
        assert payload[:4] == b"RIFF"
        assert payload[8:12] == b"WAVE"
