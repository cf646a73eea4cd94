#!/usr/bin/env python3
"""Print the animations stored in a sprite-sheet project file."""

import sys
from pathlib import Path

# Add src to path for running directly
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from sprite_animations import ProjectLoadError, SpriteSheetDocument, configure_logging


def print_document(document: SpriteSheetDocument) -> None:
    """Print a summary of the document's animations."""
    system = document.animation_system
    playback = system.get_current_playback()

    print("=" * 60)
    print(f"Image: {document.image_path}")
    print(f"Canvas: {document.canvas_size.width}x{document.canvas_size.height}")
    print(f"Animations: {system.animation_count()}")
    print("-" * 60)
    for index, animation in enumerate(system):
        marker = "*" if index == system.get_current_index() else " "
        x, y, w, h = animation.frame_rect()
        print(
            f"{marker} {index:2d} {animation.name:<24} "
            f"{animation.frame_count} frames @ {animation.fps} fps  ({x}, {y}, {w}x{h})"
        )
    print("-" * 60)
    print(f"Playback: scale={playback.scale} loop={playback.loop}")


def main():
    import argparse

    parser = argparse.ArgumentParser(description="Inspect a sprite-sheet project")
    parser.add_argument("project", type=Path, help="Project JSON file")
    parser.add_argument(
        "--upgrade",
        type=Path,
        default=None,
        help="Write the project back in the current format to this path",
    )
    parser.add_argument(
        "--log-level",
        default="WARNING",
        help="Logging level (default: WARNING)",
    )

    args = parser.parse_args()
    configure_logging(args.log_level)

    try:
        document = SpriteSheetDocument.load(args.project)
    except ProjectLoadError as e:
        print(e, file=sys.stderr)
        sys.exit(1)

    print_document(document)

    if args.upgrade is not None:
        document.save(args.upgrade)
        print(f"Saved to {args.upgrade}")


if __name__ == "__main__":
    main()
