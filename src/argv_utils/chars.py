class chars:
    check = "✓"
    xmark = "✗"
    null = "∅"
    rarrow = "▶"
