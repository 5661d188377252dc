"""
Output stream used by commands.

Builtins write text; external programs produce raw bytes that must be
forwarded verbatim. OutputStream accepts both and keeps them in write order,
either on a real text stream (the terminal) or in an in-memory buffer.
"""

import io
import sys
from typing import Optional, TextIO, Union


class OutputStream:
    """
    Unified text/binary output for stdout.

    Usage:
        out = OutputStream.to_buffer()
        out.write("text data\\n")
        out.write(b"binary data\\n")
        output = out.getvalue()  # Returns combined text

    Attributes:
        stream: Target text stream, or None when writing to the buffer
        byte_buffer: BytesIO holding buffered output (UTF-8 encoded)
    """

    def __init__(self, stream: Optional[TextIO] = None, encoding: str = 'utf-8'):
        self.stream = stream
        self.encoding = encoding
        self.byte_buffer = io.BytesIO()

    @classmethod
    def to_stdout(cls) -> 'OutputStream':
        """Stream writing to the interpreter's standard output."""
        return cls(sys.stdout)

    @classmethod
    def to_buffer(cls) -> 'OutputStream':
        """Stream capturing everything in memory."""
        return cls()

    def write(self, data: Union[str, bytes]) -> int:
        """
        Write text or bytes.

        Args:
            data: Text string or binary bytes to write

        Returns:
            Number of bytes/characters written
        """
        if self.stream is None:
            if isinstance(data, str):
                self.byte_buffer.write(data.encode(self.encoding, errors='surrogateescape'))
            else:
                self.byte_buffer.write(data)
            return len(data)

        if isinstance(data, str):
            return self.stream.write(data)

        binary = getattr(self.stream, 'buffer', None)
        if binary is None:
            return self.stream.write(data.decode(self.encoding, errors='replace'))
        # Text already queued on the wrapper must land before the raw bytes
        self.stream.flush()
        written = binary.write(data)
        binary.flush()
        return written

    def flush(self):
        """Flush the target stream (no-op for in-memory buffers)."""
        if self.stream is not None:
            self.stream.flush()

    def get_value(self) -> bytes:
        """Buffered output as bytes."""
        return self.byte_buffer.getvalue()

    def getvalue(self) -> str:
        """
        Buffered output as text.

        Binary data is decoded to UTF-8 with error replacement.
        """
        return self.get_value().decode(self.encoding, errors='replace')
