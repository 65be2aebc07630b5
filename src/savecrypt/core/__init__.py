"""Core package of savecrypt: errors, settings, logging and save-data loading."""
