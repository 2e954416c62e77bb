""" Miscellaneous helper modules for cpchop """
