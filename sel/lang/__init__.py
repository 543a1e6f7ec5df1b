""" Language front-ends and the tools to build them. """
