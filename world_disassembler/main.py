# world_disassembler/main.py
import argparse
import json
import logging
import sys
from pathlib import Path
from typing import List, Optional, Sequence, Tuple

from tqdm import tqdm

from world_disassembler.reader import WorldParsingError
from world_disassembler.utils.logging import setup_logging
from world_disassembler.world import WorldDisassembler

logger = logging.getLogger(__name__)

WORLD_PATTERN = '*.world'
OUTPUT_SUFFIXES = {
    'text': '.txt',
    'json': '.json',
}


def collect_world_files(paths: Sequence[Path]) -> Tuple[List[Path], List[Path]]:
    """Expand input paths into world files.

    Directories contribute every ``*.world`` file directly inside them.

    Returns:
        Tuple of (world files, paths that do not exist)
    """
    files: List[Path] = []
    missing: List[Path] = []
    for path in paths:
        if path.is_dir():
            found = sorted(path.glob(WORLD_PATTERN))
            if not found:
                logger.warning(f"No world files in {path}")
            files.extend(found)
        elif path.is_file():
            files.append(path)
        else:
            missing.append(path)
    return files, missing


def process_world_file(
    world_file: Path,
    output_dir: Optional[Path] = None,
    output_format: str = 'text',
    disassembler: Optional[WorldDisassembler] = None
) -> Path:
    """Disassemble one world file and write the report.

    Args:
        world_file: Path to the ``.world`` file
        output_dir: Where to write the report; defaults to the file's directory
        output_format: 'text' or 'json'
        disassembler: Disassembler to use; a new one is created if omitted

    Returns:
        Path of the written report

    Raises:
        WorldParsingError: If the file cannot be decoded; no report is written
        OSError: If reading or writing fails
    """
    disassembler = disassembler or WorldDisassembler()
    data = world_file.read_bytes()
    layout = disassembler.decode(data)

    target_dir = output_dir if output_dir is not None else world_file.parent
    target_dir.mkdir(parents=True, exist_ok=True)
    output_path = target_dir / f"{world_file.name}{OUTPUT_SUFFIXES[output_format]}"

    try:
        if output_format == 'json':
            with open(output_path, 'w', encoding='utf-8') as f:
                json.dump(layout.to_dict(), f, indent=2)
        else:
            # newline='' keeps the CRLF line endings exactly as rendered
            with open(output_path, 'w', encoding='ascii', newline='') as f:
                f.write(disassembler.render(layout))
    except OSError:
        if output_path.exists():
            output_path.unlink()
        raise

    logger.info(
        f"{world_file.name}: {len(layout.entries)} offset entries -> {output_path}"
    )
    return output_path


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description='Disassemble .world files into readable reports'
    )
    parser.add_argument('paths',
                        nargs='+',
                        help='World files or directories containing them')
    parser.add_argument('--output', '-o',
                        help='Output directory (default: next to each input)')
    parser.add_argument('--format',
                        choices=sorted(OUTPUT_SUFFIXES),
                        default='text',
                        help='Report format')
    parser.add_argument('--log-dir',
                        default='logs',
                        help='Log directory')
    parser.add_argument('--verbose', '-v',
                        action='store_true',
                        help='Enable verbose logging')
    return parser


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = build_parser().parse_args(argv)

    log_level = logging.DEBUG if args.verbose else logging.INFO
    setup_logging(args.log_dir, log_level)

    output_dir = Path(args.output) if args.output else None
    files, missing = collect_world_files([Path(p) for p in args.paths])
    for path in missing:
        logger.error(f"Path not found: {path}")

    if not files:
        logger.error("No world files to process")
        return 1

    disassembler = WorldDisassembler()
    failures = len(missing)
    for world_file in tqdm(files, desc='Disassembling', unit='file'):
        try:
            process_world_file(world_file, output_dir, args.format, disassembler)
        except (WorldParsingError, OSError) as e:
            logger.error(f"Failed to process {world_file}: {e}")
            failures += 1

    logger.info(f"Processed {len(files)} file(s), {failures} failure(s)")
    return 1 if failures else 0


if __name__ == "__main__":
    sys.exit(main())
