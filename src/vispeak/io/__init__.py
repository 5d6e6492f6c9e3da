"""I/O utilities."""

from vispeak.io.audio import read_wav, write_wav
from vispeak.io.export import to_chunk_lines, to_json, write_chunks, write_json

__all__ = ["read_wav", "to_chunk_lines", "to_json", "write_chunks", "write_json", "write_wav"]
