from pathlib import Path

from watermark_eraser.processing.exceptions import ProcessingError

_DEFAULT_PROMPT_DIR = Path(__file__).parent / "prompts"


def load_instruction(path: Path | None = None) -> str:
    """Load the watermark removal instruction from a file.

    Args:
        path: Path to the instruction file.
              Defaults to the bundled watermark_removal.txt.

    Returns:
        The instruction text with surrounding whitespace removed.

    Raises:
        ProcessingError: if the file cannot be read or is blank.
    """
    if path is None:
        path = _DEFAULT_PROMPT_DIR / "watermark_removal.txt"
    try:
        instruction = path.read_text(encoding="utf-8").strip()
    except OSError as exc:
        raise ProcessingError(f"Failed to load instruction: {exc}") from exc
    if not instruction:
        raise ProcessingError(f"Instruction file is empty: {path}")
    return instruction
