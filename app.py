"""
app.py
──────
AquaTrack: application entry point.

Startup sequence:
  1. Configure logging from LOG_LEVEL
  2. Load readings from DATA_FILE (warn and start empty if it is unreadable)
  3. Run the interactive menu; exit saves the readings back

Configuration comes from the environment, see config/settings.py.
"""
from aquatrack.cli.menu import main

if __name__ == "__main__":
    main()
