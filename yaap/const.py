VERSION = (1, 0, 0)
VERSION_STR = f"{VERSION[0]}.{VERSION[1]}.{VERSION[2]}{'-' +  str(VERSION[-1]) if len(VERSION) > 3 else ''}"
DESCRIPTION = "Yet another argument parser: declare single-character flags, then query them"

ARGV0 = "yaap-demo"
