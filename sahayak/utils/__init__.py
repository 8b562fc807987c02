"""Utility modules for Sahayak.

Media helpers shared by the flows and the Gemini client.
"""

from sahayak.utils.audio import pcm_to_wav, pcm_to_wav_data_uri
from sahayak.utils.data_uri import is_data_uri, parse_data_uri, require_data_uri, to_data_uri

__all__ = [
    "is_data_uri",
    "parse_data_uri",
    "require_data_uri",
    "to_data_uri",
    "pcm_to_wav",
    "pcm_to_wav_data_uri",
]
