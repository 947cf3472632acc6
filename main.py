import sys

# The application code lives in src/lorebook_reader; install it with
# `pip install -e .` before running this script.
try:
    from lorebook_reader.__main__ import main
except ImportError as e:
    print("Error: Could not import the 'lorebook_reader' package.")
    print("Please install the project first (pip install -e .).")
    print(f"Details: {e}")
    sys.exit(1)


if __name__ == '__main__':
    main()
