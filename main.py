#===============================================================================
#  AppLauncher  |  Desktop Application Launcher
#===============================================================================
#  Author      : Edwin A. Rodriguez
#  Created     : 2026-10-18
#  Last Update : 2026-10-18
#
#  Summary
#  -------
#  A small launcher that keeps a user-edited list of executables and starts
#  them on demand.
#  Supports:
#    - Adding entries and pointing them at an executable (file picker)
#    - Name, folder and file version shown per entry; names are editable
#    - Launching with the executable's folder as working directory
#    - Opening the containing folder with the executable selected
#    - Persistent list in <AppData>/AppLauncher/applications.json
#
#  Copyright & License Notes
#  -------------------------
#  Copyright (c) 2026 Edwin A. Rodriguez. All rights reserved.
#
#  This source code is provided "AS IS", without warranty of any kind, express
#  or implied, including but not limited to the warranties of merchantability,
#  fitness for a particular purpose, and noninfringement.
#
#  Third-Party Components
#  ----------------------
#  This project uses third-party libraries (PySide6, pywin32) which are
#  licensed separately by their respective authors. Ensure compliance with
#  their license terms when distributing this software.
#===============================================================================

from __future__ import annotations

from applauncher.app import main


if __name__ == "__main__":
    raise SystemExit(main())
