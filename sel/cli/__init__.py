""" Command line utilities. """
