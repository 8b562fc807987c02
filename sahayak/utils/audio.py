"""Audio containerization for Sahayak.

The speech model returns raw PCM samples; browsers need a playable container.
"""

import io
import wave

from sahayak.utils.data_uri import to_data_uri

CHANNELS = 1
SAMPLE_WIDTH_BYTES = 2  # 16-bit
SAMPLE_RATE = 24000


def pcm_to_wav(
    pcm: bytes,
    channels: int = CHANNELS,
    sample_rate: int = SAMPLE_RATE,
    sample_width: int = SAMPLE_WIDTH_BYTES,
) -> bytes:
    """Wrap raw little-endian PCM samples in a WAV container.

    Args:
        pcm: Raw PCM bytes
        channels: Number of channels (default mono)
        sample_rate: Samples per second (default 24kHz)
        sample_width: Bytes per sample (default 16-bit)

    Returns:
        WAV file bytes
    """
    buffer = io.BytesIO()
    with wave.open(buffer, "wb") as wf:
        wf.setnchannels(channels)
        wf.setsampwidth(sample_width)
        wf.setframerate(sample_rate)
        wf.writeframes(pcm)
    return buffer.getvalue()


def pcm_to_wav_data_uri(pcm: bytes) -> str:
    """Wrap raw PCM in a 1-channel, 16-bit, 24kHz WAV and return it as a data URI."""
    return to_data_uri("audio/wav", pcm_to_wav(pcm))
