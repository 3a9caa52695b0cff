"""Platform adapters: logging and the Last.fm web service boundary."""
