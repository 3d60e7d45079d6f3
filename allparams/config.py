"""
Configuration constants for allparams.
"""

# --- MediaInfo Options ---
# Option returning the category-sectioned list of every known parameter
INFO_PARAMETERS_OPTION = "Info_Parameters"

# MediaInfo_Get info kinds (see MediaInfoDLL.h)
INFO_NAME = 0
INFO_TEXT = 1

# StreamNumber value that makes MediaInfo_Count_Get count streams of a kind
COUNT_ALL_STREAMS = -1

# --- Output ---
# Parameter whose value is itself a "key: value" report
INFORM_PARAM = "Inform"
LABEL_WIDTH = 28
HEADER_FORMAT = "[{label} #{number}]"

# --- CLI Messages ---
USAGE_ERROR = "Error: Give exactly one filename as an argument."
OPEN_ERROR = "Error: Could not open file:"
LIBRARY_ERROR = "Error: Could not load the MediaInfo library:"
