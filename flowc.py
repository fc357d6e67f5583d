#!/usr/bin/env python3
"""flowc: the Flow compiler.

Thin entry point that delegates to flowc.compiler.main.
"""

from src.flowc.compiler.main import main

if __name__ == "__main__":
    main()
