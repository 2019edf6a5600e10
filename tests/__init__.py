"""
Test suite for smart_utils.

Organized by module:
- test_strings.py - String transformation and validation
- test_numbers.py - Number formatting, random ranges and rounding
- test_patterns.py - Date pattern compiler
- test_dates.py - Relative dates, day labels and duration summaries
- test_logger.py - Console logger levels, colors and file copy
- test_device.py - Platform, device info, connectivity and screen metrics
- test_widgets.py - Snackbars, toasts, loader, dialogs and sheets
- test_layout.py - Render geometry queries
- test_config.py - Settings
"""

# Test fixtures are provided in conftest.py
