# braille_autocorrect.utils - config, logging and metrics helpers
