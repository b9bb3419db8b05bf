import io
import logging

from typing import Callable, ContextManager, Optional, TextIO, TypeVar
from contextlib import contextmanager

from atmfjstc.lib.py_lang_utils.iteration import iter_with_last

from atmfjstc.lib.rust_codegen.RenderOptions import RenderOptions


LOG = logging.getLogger(__name__)

T = TypeVar('T')


class Formatter:
    """
    An indentation-aware text sink through which all rendering is done.

    The formatter keeps track of the current indentation depth and of whether the output is at the start of a line.
    Every line of text that starts at the beginning of an output line receives the indent prefix; text written in the
    middle of a line is appended as-is. Empty lines are never indented.

    Example::

        fmt = Formatter()
        fmt.write("fn main()")
        fmt.block(lambda f: f.write_line('println!("hi");'))

    Result::

        fn main() {
            println!("hi");
        }

    Notes:

    - By default the text is collected in an in-memory buffer that can be read back with `getvalue()`. Any other
      writable text object (e.g. an open file) can be supplied instead.
    - Errors raised by the underlying sink are never caught. The indentation depth is nonetheless restored by every
      scoped block that the error passes through.
    """

    _sink: TextIO
    _options: RenderOptions
    _depth: int = 0
    _at_line_start: bool = True

    def __init__(self, sink: Optional[TextIO] = None, options: Optional[RenderOptions] = None):
        self._sink = io.StringIO() if sink is None else sink
        self._options = options or RenderOptions()
        self._depth = 0
        self._at_line_start = True

    @property
    def depth(self) -> int:
        """The current indentation depth (number of nested scoped blocks)."""
        return self._depth

    @property
    def options(self) -> RenderOptions:
        return self._options

    def is_start_of_line(self) -> bool:
        return self._at_line_start

    def write(self, text: str):
        """
        Writes text to the sink, adding the indent prefix to every non-empty line that starts a new output line.
        """
        for line, is_last in iter_with_last(text.split('\n')):
            if line != '':
                if self._at_line_start:
                    self._sink.write(self._options.indent_unit * self._depth)
                self._sink.write(line)
                self._at_line_start = False

            if not is_last:
                self._sink.write('\n')
                self._at_line_start = True

    def write_line(self, text: str = ''):
        self.write(text + '\n')

    @contextmanager
    def indented(self) -> ContextManager['Formatter']:
        """
        Use ``with fmt.indented(): <code>`` to render some content one indentation level deeper.

        The previous depth is restored when the block exits, whether normally or through an exception.
        """
        self._depth += 1
        try:
            yield self
        except Exception:
            LOG.debug("Unwinding indent level %d after a rendering error", self._depth)
            raise
        finally:
            self._depth -= 1

    def scoped_block(self, body: Callable[['Formatter'], T]) -> T:
        """
        Calls `body` with this formatter, one indentation level deeper, and returns whatever it returns.
        """
        with self.indented():
            return body(self)

    def block(self, body: Callable[['Formatter'], T], tail: str = '') -> T:
        """
        Renders a brace-delimited block whose content is produced by `body` at one extra level of indentation.

        If the output is in the middle of a line, the opening brace is separated from the preceding text by a space.
        The `tail` text (e.g. a comma) is appended right after the closing brace.
        """
        if not self.is_start_of_line():
            self.write(' ')

        self.write('{\n')
        result = self.scoped_block(body)
        self.write('}' + tail + '\n')

        return result

    def getvalue(self) -> str:
        """
        Returns the text rendered so far. Only available when the formatter was created with the default in-memory
        sink (or another sink that supports ``getvalue()``).
        """
        return self._sink.getvalue()
