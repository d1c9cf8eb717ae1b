import re

TOKEN_PATTERN = re.compile(r"\w\S*")
INITIALISM_PATTERN = re.compile(r"^(?:[A-Za-z]\.){2,}[A-Za-z]?\.?$")


def title_token(token: str) -> str:
    # Some characters titlecase to more than one ("ß" -> "Ss"), only the first of those stays capital.
    head = token[0].title()
    titled = head[0] + (head[1:] + token[1:]).lower()

    if INITIALISM_PATTERN.match(titled):
        return titled.upper()

    return titled


def normalize_label(raw: str | None) -> str:
    return TOKEN_PATTERN.sub(lambda m: title_token(m.group(0)), (raw or "").strip())


def major_key(label: str) -> str:
    return label.strip().lower()


def dedupe_labels(labels) -> list[str]:
    seen: dict[str, str] = {}

    for label in labels:
        seen.setdefault(major_key(label), label.strip())

    return list(seen.values())
