"""Pretty-printing of generated text before it is written.

Two formatters:
  builtin   Brace-depth re-indenter. Pure Python, deterministic, always available.
  prettier  Runs the `prettier` CLI (must be on PATH) with --parser <syntax>.

Both raise FormatterError on failure. Callers do not catch it — a formatter
failure aborts the pass before anything is written.
"""

import shutil
import subprocess

INDENT = '  '
PRETTIER = 'prettier'
PRETTIER_TIMEOUT = 30


class FormatterError(RuntimeError):
    """Generated text could not be formatted."""


class Formatter:
    name = 'base'

    def format(self, text: str, syntax: str) -> str:
        raise NotImplementedError


class BuiltinFormatter(Formatter):
    """Re-indent brace-structured text (CSS, JS object literals).

    One statement per input line is assumed, which is how the generators emit.
    Braces inside /* */ comments and quoted strings are ignored.
    """

    name = 'builtin'

    def format(self, text: str, syntax: str) -> str:
        out: list[str] = []
        depth = 0
        in_comment = False
        blank_pending = False

        for lineno, raw in enumerate(text.splitlines(), start=1):
            line = raw.strip()
            if not line:
                blank_pending = bool(out)
                continue

            opens, closes, leading_closes, in_comment = _scan_braces(line, in_comment, lineno)
            indent_depth = depth - leading_closes
            if indent_depth < 0:
                raise FormatterError(f'line {lineno}: unbalanced closing brace')
            if blank_pending:
                out.append('')
                blank_pending = False
            out.append(INDENT * indent_depth + line)
            depth += opens - closes
            if depth < 0:
                raise FormatterError(f'line {lineno}: unbalanced closing brace')

        if in_comment:
            raise FormatterError('unterminated comment')
        if depth != 0:
            raise FormatterError(f'{depth} unclosed brace(s) at end of {syntax} input')
        return '\n'.join(out) + '\n'


def _scan_braces(line: str, in_comment: bool, lineno: int) -> tuple[int, int, int, bool]:
    """Count braces outside comments and strings.

    Returns (opens, closes, leading_closes, still_in_comment). leading_closes
    counts the closing braces before any other code on the line, which is
    what dedents the line itself.
    """
    opens = closes = leading = 0
    seen_code = False
    quote = ''
    i = 0
    while i < len(line):
        ch = line[i]
        if in_comment:
            if line.startswith('*/', i):
                in_comment = False
                i += 2
                continue
        elif quote:
            if ch == '\\':
                i += 2
                continue
            if ch == quote:
                quote = ''
        elif line.startswith('/*', i):
            in_comment = True
            i += 2
            continue
        elif ch in ('"', "'"):
            quote = ch
            seen_code = True
        elif ch == '{':
            opens += 1
            seen_code = True
        elif ch == '}':
            closes += 1
            if not seen_code:
                leading += 1
        elif not ch.isspace():
            seen_code = True
        i += 1
    if quote:
        raise FormatterError(f'line {lineno}: unterminated string')
    return opens, closes, leading, in_comment


class PrettierFormatter(Formatter):
    """Delegate to the prettier CLI."""

    name = 'prettier'

    def __init__(self, binary: str = PRETTIER, timeout: float = PRETTIER_TIMEOUT):
        self.binary = binary
        self.timeout = timeout

    def available(self) -> bool:
        return shutil.which(self.binary) is not None

    def format(self, text: str, syntax: str) -> str:
        try:
            proc = subprocess.run(
                [self.binary, '--parser', syntax],
                input=text,
                capture_output=True,
                text=True,
                timeout=self.timeout,
            )
        except FileNotFoundError as e:
            raise FormatterError(f'{self.binary} not found on PATH') from e
        except subprocess.TimeoutExpired as e:
            raise FormatterError(f'{self.binary} timed out after {self.timeout}s') from e
        if proc.returncode != 0:
            raise FormatterError(f'{self.binary} failed ({proc.returncode}): {proc.stderr.strip()}')
        return proc.stdout


_FORMATTERS: dict[str, type[Formatter]] = {
    'builtin': BuiltinFormatter,
    'prettier': PrettierFormatter,
}


def get_formatter(name: str) -> Formatter:
    """Get a formatter by name."""
    if name not in _FORMATTERS:
        raise ValueError(f'Unknown formatter: {name}. Available: {", ".join(sorted(_FORMATTERS))}')
    return _FORMATTERS[name]()
