#!/usr/bin/env python
"""CLI for News Pages."""

from news_pages.cli import main

if __name__ == "__main__":
    main()
