"""Content rules shared by the request schemas and services.

Emoji detection relies on the Unicode properties exposed by the ``regex``
package, which tracks the current Unicode emoji data:

* every code point must be ``Extended_Pictographic`` or ``Emoji_Component``
  (pictographs, skin tone modifiers, ZWJ, variation selectors, keycap
  combiners, regional indicators, tags);
* the string must contain something visible: a pictograph, a regional
  indicator or a keycap sequence.  Joiners, selectors and modifiers do not
  render on their own, and ``0-9``, ``#`` and ``*`` are plain text unless
  they form a keycap.
"""

import regex

EMOJI_PATTERN = regex.compile(r"(?:\p{Extended_Pictographic}|\p{Emoji_Component})+")
VISIBLE_EMOJI_PATTERN = regex.compile(
    r"\p{Extended_Pictographic}|[\U0001F1E6-\U0001F1FF]|[0-9#*]\uFE0F?\u20E3"
)

MIN_POST_LENGTH = 1
MAX_POST_LENGTH = 280


def content_length(text: str) -> int:
    """Length in Unicode code points."""
    return len(text)


def is_emoji(text: str) -> bool:
    if not text or EMOJI_PATTERN.fullmatch(text) is None:
        return False
    return VISIBLE_EMOJI_PATTERN.search(text) is not None
