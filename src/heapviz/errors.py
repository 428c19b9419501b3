class InvalidConfiguration(ValueError):
    """Raised when a playback command carries an unusable depth or speed.

    The engine state is left untouched whenever this is raised.
    """
