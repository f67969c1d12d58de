from lox.errors import LexError


def error_message(source: str, location: int, message: str) -> str:
    line_start = source.rfind("\n", 0, location) + 1
    line_end = source.find("\n", location)
    if line_end == -1:
        line_end = len(source)
    column = location - line_start
    messages = [f"{source[line_start:line_end]}\n", f"{' ' * column}^ {message}\n"]
    return "".join(messages)


def format_error(source: str, error: LexError) -> str:
    return f"{error}\n{error_message(source, error.location, error.message)}"
