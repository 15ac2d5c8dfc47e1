"""Minimal example turning a urlencoded form body into nested data."""

import io
from urllib.parse import parse_qsl

from nested_form_data import DuplicateKeyError, parse_form_data


def main() -> None:
    """Parse a form body, then show a custom transform and a conflict."""
    body = "user.name=Ada&%2Buser.age=36&%26user.admin=true&user.tags[]=math&user.tags[]=engines&user.note="
    entries = parse_qsl(body, keep_blank_values=True)
    print("parsed:", parse_form_data(entries, remove_empty_string=True))

    upload = io.BytesIO(b"notes")
    result = parse_form_data(
        [("files[0]", upload), ("title", "report")],
        transform_entry=lambda entry, default: (entry[0], entry[1].title())
        if isinstance(entry[1], str)
        else default(entry),
    )
    print("with transform:", result)

    try:
        _ = parse_form_data([("a", "b"), ("a[]", "c")])
    except DuplicateKeyError as exc:
        print("conflict at:", exc.key)


if __name__ == "__main__":
    main()
