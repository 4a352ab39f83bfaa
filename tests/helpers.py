from typing import TextIO


def output_lines(stream: TextIO) -> list[str]:
    getvalue = getattr(stream, "getvalue", None)
    assert callable(getvalue)
    return str(getvalue()).splitlines()


def assert_keywords_in_output(keywords: tuple[str, ...], text: str) -> None:
    lowered = text.lower()
    for keyword in keywords:
        assert keyword.lower() in lowered
