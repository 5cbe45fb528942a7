#!/usr/bin/env python3
"""Generate a single puzzle from the command line and print it as JSON."""

import sys
import os
sys.path.append(os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

import asyncio
import json
import logging

from wordfinder.errors import PipelineError
from wordfinder.main import build_pipeline

logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)


def main():
    """Run the pipeline once."""
    pipeline = build_pipeline()
    
    try:
        puzzle = asyncio.run(pipeline.generate_puzzle())
    except PipelineError as e:
        logger.error(f"Puzzle generation failed during {e.stage.value}: {e}")
        return 1
    
    print(json.dumps({"reply": puzzle}, indent=2, ensure_ascii=False))
    return 0


if __name__ == "__main__":
    sys.exit(main())
