"""
Piano - Entry Point

Opens the keyboard window, wires keys to samples and runs the frame loop
until the window is closed (or Escape is pressed).
"""

import crashguard  # Must come first
crashguard.checkpoint("Crashguard imported")

import sys
import traceback

try:
    from core.app import PianoApplication
    from core.errors import BackendInitFailure
    import showlog
    crashguard.checkpoint("PianoApplication imported successfully")
except Exception as e:
    crashguard.emergency_log(f"FATAL: Failed to import PianoApplication: {e}")
    crashguard.emergency_log(traceback.format_exc())
    raise


def main():
    """
    Application entry point.

    Returns the process exit status: 0 on a normal quit, 1 when a platform
    subsystem could not be started or the loop died.
    """
    crashguard.checkpoint("Entering main()")
    status = 0
    app = None

    try:
        app = PianoApplication()

        # Display, mixer, key table, optional preload, font and frame loop
        crashguard.checkpoint("Starting app.initialize()...")
        app.initialize()
        crashguard.checkpoint("app.initialize() complete")

        crashguard.checkpoint("Entering frame loop...")
        app.run()

    except KeyboardInterrupt:
        crashguard.checkpoint("Interrupted by user (KeyboardInterrupt)")
        print("\n[EXIT] Interrupted by user")
    except BackendInitFailure as e:
        status = 1
        crashguard.emergency_log(f"Startup failed: {e}")
        showlog.error(f"[INIT] {e}", e)
        print(f"[ERROR] {e}")
    except Exception as e:
        status = 1
        crashguard.emergency_log(f"Application error: {e}")
        crashguard.emergency_log(traceback.format_exc())
        showlog.error(f"[APP] Application error: {e}", e)
        traceback.print_exc()
    finally:
        crashguard.checkpoint("Entering cleanup...")
        if app is not None:
            try:
                app.cleanup()
                crashguard.checkpoint("Cleanup complete")
            except Exception as e:
                crashguard.emergency_log(f"Error during cleanup: {e}")
        showlog.flush()

    return status


if __name__ == "__main__":
    sys.exit(main())
