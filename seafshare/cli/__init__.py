"""seafshare command line interface."""
