"""Incremental codec wrapper with explicit carry of undecoded bytes."""

import codecs

from stream_splitter.errors import ArgumentError

DEFAULT_ENCODING = "utf-8"

# Malformed input is substituted rather than treated as fatal.
ERRORS_POLICY = "replace"


class CodecAdapter:
    """
    Decode raw chunks to text and encode text back to the same encoding.

    The decoder never keeps bytes between calls: a trailing incomplete
    sequence is reported through the consumed count and the caller prepends
    it to the next chunk.
    """

    def __init__(self, codec_info: codecs.CodecInfo):
        self._info = codec_info
        self._decoder = codec_info.incrementaldecoder(ERRORS_POLICY)
        self._encoder = codec_info.incrementalencoder(ERRORS_POLICY)
        self._encoded = False

    @property
    def name(self) -> str:
        return self._info.name

    def decode(self, data: bytes, final: bool = False) -> tuple[int, str]:
        """
        Decode as much of data as forms complete characters.

        Returns (consumed_byte_count, text). With final=True every byte is
        consumed and an incomplete tail becomes a replacement character.
        """
        text = self._decoder.decode(data, final)
        pending, flag = self._decoder.getstate()
        # Hand the undecoded tail back to the caller, keep BOM/shift state.
        self._decoder.setstate((b"", flag))
        return len(data) - len(pending), text

    def encode(self, text: str) -> bytes:
        self._encoded = True
        return self._encoder.encode(text)

    def flush_encoder(self) -> bytes:
        """Return any bytes a stateful encoder still owes, e.g. a shift back to ASCII."""
        if not self._encoded:
            return b""
        return self._encoder.encode("", True)

    def reset_encoder(self) -> None:
        """Start a fresh encoder, e.g. so a new output file gets its own BOM."""
        self._encoder.reset()
        self._encoded = False


def resolve_codec(label: str | None = None) -> CodecAdapter:
    """Look up an encoding label, defaulting to UTF-8."""
    name = label if label is not None else DEFAULT_ENCODING
    try:
        info = codecs.lookup(name)
    except LookupError:
        raise ArgumentError("encoding", f"invalid encoding name:{name}") from None

    # Text codecs only; rot13, base64 and friends are not byte<->str codecs.
    if not getattr(info, "_is_text_encoding", True):
        raise ArgumentError("encoding", f"invalid encoding name:{name}")
    return CodecAdapter(info)
