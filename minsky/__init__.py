""" Magnificent Minsky Machines: the M3 notation, and an interpreter for it. """
