from pathlib import Path


def add_suffix_to_top_level(rel_path: Path, suffix: str) -> Path:
    """
    Rename the first directory of a relative path by appending `suffix`.

    Example:
        'corpus/novels/alice.txt' + '_encoded'
        -> 'corpus_encoded/novels/alice.txt'
    """
    parts = list(rel_path.parts)
    if not parts:
        return Path()
    parts[0] += suffix
    return Path(*parts)


def suffix_filename(path: Path, suffix: str) -> Path:
    """
    Insert `suffix` between the file stem and its extension.

    Example:
        alice.txt + '_decoded' -> alice_decoded.txt
        LICENSE   + '_encoded' -> LICENSE_encoded
    """
    if not path.suffix:
        return path.with_name(f"{path.name}{suffix}")
    return path.with_name(f"{path.stem}{suffix}{path.suffix}")


def relative_output_path(
    in_path: Path,
    input_root: Path,
    output_root: Path,
    suffix: str,
) -> Path:
    """
    Mirror `in_path` (a file below `input_root`) into `output_root`,
    tagging both the top-level folder and the filename with `suffix`.
    """
    rel_path = in_path.relative_to(input_root)
    rel_dir = add_suffix_to_top_level(rel_path.parent, suffix)
    return output_root / rel_dir / suffix_filename(Path(rel_path.name), suffix).name
