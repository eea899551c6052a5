"""Highlight NESFab source to HTML with Pygments."""

from nesfab_mode.highlighting import classify_tokens, highlight

code = "fn main()\n    U x = $10 /* nested /* ok */ */\n"

print(highlight(code))
for category, text in classify_tokens(code):
    if category != "whitespace":
        print(f"{category:12} {text!r}")
