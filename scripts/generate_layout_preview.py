#!/usr/bin/env python3
"""
Generate a Layout Preview for Scattered Opinion Cards

Renders a PNG showing where the scatter places each card, with wrapped
opinion text on every card. Fallback cards are outlined in orange.

Usage:
    python scripts/generate_layout_preview.py --count 6 --seed 42
    python scripts/generate_layout_preview.py --identity event-17 "First opinion" "Second opinion"
"""
from __future__ import annotations

import argparse
import json
import logging
from pathlib import Path

from timeline_toolkit.layout import PlacementCache, stable_seed
from timeline_toolkit.text import wrap_text
from timeline_toolkit.utils import save_preview

logging.basicConfig(level=logging.INFO, format="%(message)s")
logger = logging.getLogger(__name__)

PROJECT_ROOT = Path(__file__).resolve().parent.parent
PREVIEW_DIR = PROJECT_ROOT / "scripts" / "layout_previews"


def main():
    parser = argparse.ArgumentParser(description="Render a scattered card layout preview")
    parser.add_argument("opinions", nargs="*", help="Opinion texts, one per card")
    parser.add_argument("--count", type=int, default=None, help="Number of cards (default: number of opinions)")
    parser.add_argument("--seed", type=int, default=None, help="Seed for the random source")
    parser.add_argument("--identity", default=None, help="Derive the seed from this identity (e.g. an event id)")
    parser.add_argument("--output", type=Path, default=PREVIEW_DIR, help="Output directory")
    parser.add_argument("--dump", action="store_true", help="Print placements as JSON")
    
    args = parser.parse_args()
    
    count = args.count if args.count is not None else len(args.opinions)
    if count <= 0:
        logger.error("Nothing to place: pass opinions or --count")
        return 1
    
    if args.identity is not None:
        seed = stable_seed(args.identity)
        name = args.identity
    else:
        seed = args.seed if args.seed is not None else 0
        name = f"seed_{seed}_count_{count}"
    
    placements = PlacementCache(max_entries=1).get_or_generate(count, seed)
    labels = [wrap_text(text) for text in args.opinions[:count]]
    
    output_path = save_preview(placements, args.output, name, labels=labels)
    fallback_count = sum(p.is_fallback for p in placements)
    logger.info(f"{count} cards, {fallback_count} from grid fallback -> {output_path}")
    
    if args.dump:
        print(json.dumps([p.to_dict() for p in placements], indent=2))
    
    return 0


if __name__ == "__main__":
    exit(main())
