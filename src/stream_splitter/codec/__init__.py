"""Streaming text decode/encode for the line splitter."""

from stream_splitter.codec.adapter import DEFAULT_ENCODING, CodecAdapter, resolve_codec

__all__ = ["DEFAULT_ENCODING", "CodecAdapter", "resolve_codec"]
