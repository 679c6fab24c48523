FENCE = "```"


def strip_code_blocks(text: str) -> str:
    """Remove triple-backtick fenced blocks, markers included.

    Fence state lives only for this call. An unclosed fence drops
    everything after its opening marker.
    """
    kept: list[str] = []
    in_block = False

    for line in text.split("\n"):
        if line.strip().startswith(FENCE):
            in_block = not in_block
            continue
        if not in_block:
            kept.append(line)

    return "\n".join(kept).rstrip("\n")
