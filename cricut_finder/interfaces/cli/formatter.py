"""
Listing formatting utilities for CLI output
"""

import json
import sys
from typing import List

import yaml

from cricut_finder.domain.value_objects import DiscoveredFile, display_text


class ListingFormatter:
    """
    Format discovered files for different output types
    """

    def __init__(self, format: str = "pretty", use_colors: bool = True):
        self.format = format
        self.use_colors = use_colors and self._supports_color()

        if self.use_colors:
            self.colors = {
                'reset': '\033[0m',
                'green': '\033[92m',
                'cyan': '\033[96m',
                'dim': '\033[2m',
                'bold': '\033[1m',
            }
        else:
            self.colors = {k: '' for k in ['reset', 'green', 'cyan', 'dim', 'bold']}

    def _supports_color(self) -> bool:
        """Check if terminal supports colors"""
        return hasattr(sys.stdout, "isatty") and sys.stdout.isatty()

    def _colorize(self, text: str, color: str) -> str:
        return f"{self.colors[color]}{text}{self.colors['reset']}"

    def format_files(self, files: List[DiscoveredFile]) -> str:
        """
        Format the listing

        Args:
            files: Files in display order; row numbers start at 1

        Returns:
            Formatted string
        """
        if self.format == "json":
            return self._format_json(files)
        elif self.format == "yaml":
            return self._format_yaml(files)
        else:
            return self._format_pretty(files)

    def _rows(self, files: List[DiscoveredFile]) -> List[dict]:
        return [dict(index=i, **f.to_dict()) for i, f in enumerate(files, start=1)]

    def _format_json(self, files: List[DiscoveredFile]) -> str:
        return json.dumps(self._rows(files), indent=2, ensure_ascii=False)

    def _format_yaml(self, files: List[DiscoveredFile]) -> str:
        return yaml.safe_dump(self._rows(files), allow_unicode=True, sort_keys=False).rstrip()

    def _format_pretty(self, files: List[DiscoveredFile]) -> str:
        """Format files as an aligned table"""
        if not files:
            return "No data"

        index_width = len(str(len(files)))
        name_width = max(len("Name"), max(len(display_text(f.name)) for f in files))

        output = [
            self._colorize(
                f"{'#':>{index_width}}  {'Name':<{name_width}}  {'Modified':<19}  Folder",
                "bold",
            )
        ]
        for i, f in enumerate(files, start=1):
            name = display_text(f.name)
            modified = f.last_modified.strftime("%Y-%m-%d %H:%M:%S")
            output.append(
                f"{i:>{index_width}}  {self._colorize(f'{name:<{name_width}}', 'cyan')}  "
                f"{modified}  {self._colorize(display_text(f.containing_directory), 'dim')}"
            )

        output.append("")
        output.append(self._colorize(f"{len(files)} file(s)", "green"))
        return "\n".join(output)
