"""Line tokenizer for the USDA purine CSV exports."""


def tokenize_line(line: str) -> list[str]:
    """Split one physical CSV line into trimmed fields.

    Commas inside a double-quoted span do not split. Quote characters only
    toggle the quoted state and are dropped from the output; doubled quotes
    are not unescaped.
    """
    fields: list[str] = []
    current: list[str] = []
    in_quotes = False
    for char in line:
        if char == '"':
            in_quotes = not in_quotes
        elif char == "," and not in_quotes:
            fields.append("".join(current).strip())
            current = []
        else:
            current.append(char)
    fields.append("".join(current).strip())
    return fields
