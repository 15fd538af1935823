"""CLI entry point: python -m js_dependency_extractor"""

from js_dependency_extractor.cli import main

if __name__ == "__main__":
    main()
