# topmark:header:start
#
#   project      : MultipartForm
#   file         : media.py
#   file_relpath : src/multipartform/filetypes/builtins/media.py
#   license      : MIT
#   copyright    : (c) 2025 MultipartForm contributors
#
# topmark:header:end

"""Audio, video and font formats (metadata only).

Exports:
    FILETYPES: MP3, WAV, MP4 and TrueType font descriptors. None of them
        inspects content.
"""

from __future__ import annotations

from multipartform.filetypes.base import ContentType, FileType

FILETYPES: list[FileType] = [
    FileType(
        name="mp3",
        content_type=ContentType("audio", "mpeg"),
        extension="mp3",
        description="MPEG audio layer III",
    ),
    FileType(
        name="wav",
        content_type=ContentType("audio", "wav"),
        extension="wav",
        description="Waveform audio",
    ),
    FileType(
        name="mp4",
        content_type=ContentType("video", "mp4"),
        extension="mp4",
        description="MPEG-4 video",
    ),
    FileType(
        name="ttf",
        content_type=ContentType("font", "ttf"),
        extension="ttf",
        description="TrueType font",
    ),
]
