#!/usr/bin/env python3
"""
Vector Math Visualizer - Main Entry Point

An interactive graph for adding and subtracting 2-D vectors. Drag
vectors on a grid and watch their resultant update.

Usage:
    python main.py
    python main.py --debug              # Enable debug logging
    python main.py --ticks-x 80 --ticks-y 50
    python main.py --no-lock            # Start with grid lock off
    python main.py --config my.json     # Use a specific settings file
"""

import sys
import logging
import argparse
import dataclasses
from PyQt6.QtWidgets import QApplication
from PyQt6.QtCore import Qt
from PyQt6.QtGui import QFont, QPalette, QColor

from models import GraphModel
from services import SettingsManager, GraphSettings, get_settings
from views import MainWindow


def setup_logging(debug: bool = False):
    """Configure logging for the application."""
    level = logging.DEBUG if debug else logging.INFO
    
    # Create formatter
    formatter = logging.Formatter(
        '%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        datefmt='%H:%M:%S'
    )
    
    # Console handler
    console_handler = logging.StreamHandler()
    console_handler.setLevel(level)
    console_handler.setFormatter(formatter)
    
    # Configure root logger
    root_logger = logging.getLogger()
    root_logger.setLevel(level)
    root_logger.addHandler(console_handler)
    
    # Log startup message
    logger = logging.getLogger(__name__)
    logger.info(f"Logging initialized at {'DEBUG' if debug else 'INFO'} level")


def setup_application() -> QApplication:
    """Configure the Qt application."""
    # High DPI support
    QApplication.setHighDpiScaleFactorRoundingPolicy(
        Qt.HighDpiScaleFactorRoundingPolicy.PassThrough
    )
    
    app = QApplication(sys.argv)
    app.setApplicationName("Vector Math")
    app.setApplicationVersion("0.1.0")
    app.setOrganizationName("vector-math")
    
    # Set default font
    font = QFont("SF Pro Display", 10)
    if not font.exactMatch():
        font = QFont("Segoe UI", 10)
    if not font.exactMatch():
        font = QFont("Helvetica Neue", 10)
    app.setFont(font)
    
    # Set up palette for consistent look
    palette = QPalette()
    palette.setColor(QPalette.ColorRole.Window, QColor("#F3F4F6"))
    palette.setColor(QPalette.ColorRole.WindowText, QColor("#111827"))
    palette.setColor(QPalette.ColorRole.Base, QColor("#FFFFFF"))
    palette.setColor(QPalette.ColorRole.AlternateBase, QColor("#F9FAFB"))
    palette.setColor(QPalette.ColorRole.Text, QColor("#374151"))
    palette.setColor(QPalette.ColorRole.Button, QColor("#FFFFFF"))
    palette.setColor(QPalette.ColorRole.ButtonText, QColor("#374151"))
    palette.setColor(QPalette.ColorRole.Highlight, QColor("#3B82F6"))
    palette.setColor(QPalette.ColorRole.HighlightedText, QColor("#FFFFFF"))
    app.setPalette(palette)
    
    return app


def build_graph(settings_manager: SettingsManager, args: argparse.Namespace) -> GraphModel:
    """Create the graph from saved settings and command line overrides."""
    logger = logging.getLogger(__name__)
    # Overrides apply to this run only, never to the saved settings
    overrides = {}
    if args.ticks_x is not None:
        overrides["num_x_ticks"] = args.ticks_x
    if args.ticks_y is not None:
        overrides["num_y_ticks"] = args.ticks_y
    if args.no_lock:
        overrides["lock_to_grid"] = False
    graph_settings = dataclasses.replace(settings_manager.graph, **overrides)
    
    try:
        return graph_settings.create_graph()
    except (ValueError, TypeError) as e:
        logger.warning(f"Invalid graph settings ({e}), using defaults")
        return GraphSettings().create_graph()


def main():
    """Main entry point."""
    # Parse command line arguments
    parser = argparse.ArgumentParser(description='Vector Math Visualizer')
    parser.add_argument('--debug', action='store_true', help='Enable debug logging')
    parser.add_argument('--ticks-x', type=int, default=None, help='Grid width in units')
    parser.add_argument('--ticks-y', type=int, default=None, help='Grid height in units')
    parser.add_argument('--no-lock', action='store_true', help='Start with grid lock off')
    parser.add_argument('--config', default=None, help='Path to a settings file')
    args = parser.parse_args()
    
    # Setup logging
    setup_logging(debug=args.debug)
    
    settings_manager = get_settings(args.config)
    graph = build_graph(settings_manager, args)
    
    app = setup_application()
    
    # Create and show main window
    window = MainWindow(settings_manager, graph)
    window.show()
    
    # Run event loop
    sys.exit(app.exec())


if __name__ == "__main__":
    main()
