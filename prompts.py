"""Line-based typed input for the terminal drill."""

BAD_INPUT = "[Bad input. Try again.]"


def input_try(parse, msg: str = "", prompt: str = "> ", cancel: str = "?",
              reader=input, out=print):
    """
    Ask until *parse* accepts the line, and return the parsed value.

    Typing *cancel* returns None instead. *parse* signals a bad line by
    raising ValueError (``int`` already does).
    """
    if msg:
        out(msg)
    while True:
        line = reader(prompt).strip()
        if line == cancel:
            return None
        try:
            return parse(line)
        except ValueError:
            out(BAD_INPUT)
