""" Generic lexing and parsing helpers. """
