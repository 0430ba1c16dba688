"""Candidate data file formats."""

from src.infrastructure.importers.delimited_record_codec import DelimitedRecordCodec
from src.infrastructure.importers.key_value_block_codec import KeyValueBlockCodec


CODECS_BY_FORMAT = {
    DelimitedRecordCodec.format_name: DelimitedRecordCodec,
    KeyValueBlockCodec.format_name: KeyValueBlockCodec,
}


def create_codec(file_format: str) -> DelimitedRecordCodec | KeyValueBlockCodec:
    """書式名からコーデックを生成する."""
    try:
        return CODECS_BY_FORMAT[file_format]()
    except KeyError:
        raise ValueError(f"Unknown candidate file format: {file_format}") from None


__all__ = [
    "CODECS_BY_FORMAT",
    "DelimitedRecordCodec",
    "KeyValueBlockCodec",
    "create_codec",
]
