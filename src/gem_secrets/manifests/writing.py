"""Writing rendered manifests to disk.

Each manifest is written on its own; a failed write is reported and does
not stop the remaining ones.
"""

import os
from collections.abc import Iterable
from pathlib import Path

from icecream import ic
from rich.markup import escape

from gem_secrets import console
from gem_secrets.exceptions import ManifestIOError
from gem_secrets.models import WriteResult

MANIFEST_FILE_MODE = 0o644


def write_manifest(path: str | Path, text: str, *, mode: int = MANIFEST_FILE_MODE) -> Path:
    """Write manifest text to a file, replacing any existing content.

    Args:
        path: Destination file.
        text: Rendered YAML.
        mode: Permission bits applied to the file.

    Returns:
        The path that was written.

    Raises:
        ManifestIOError: If the file cannot be written.

    """
    output_path = Path(path)
    output_tmp = output_path.with_name(f"{output_path.name}_new")
    ic(output_path)

    try:
        output_tmp.write_text(text, encoding="utf-8")
        os.chmod(output_tmp, mode)
        # Atomic replace once the full text is on disk
        os.replace(output_tmp, output_path)
    except OSError as err:
        output_tmp.unlink(missing_ok=True)
        raise ManifestIOError(output_path, err) from err

    return output_path


def write_manifests(outputs: Iterable[tuple[str | Path, str]], *, mode: int = MANIFEST_FILE_MODE) -> list[WriteResult]:
    """Write several manifests, attempting every one of them.

    Args:
        outputs: Pairs of (destination path, rendered YAML).
        mode: Permission bits applied to each file.

    Returns:
        One WriteResult per output, in input order.

    """
    results: list[WriteResult] = []

    for path, text in outputs:
        try:
            written = write_manifest(path, text, mode=mode)
        except ManifestIOError as err:
            console.error(escape(str(err)))
            results.append(WriteResult(path=Path(path), error=str(err)))
            continue

        console.success(f"Wrote {console.highlight(str(written))}")
        results.append(WriteResult(path=written))

    return results
