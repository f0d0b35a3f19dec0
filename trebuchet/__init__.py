"""
Trebuchet
=========
Independent plaintext puzzle solvers, each computing two answers from
one input file.

Architecture:
    - Digit Extractor: first/last digit (and number word) per line (day 1)
    - Cube-Game Parser: per-color maxima of drawn cube subsets (day 2)
    - Schematic Scanner: row state machine for part numbers and gears (day 3)
    - Scratchcard Matcher: match scoring and cascading copies (day 4)
    - Engine: input reading, dispatch, optional worker pool, timing
    - CLI: click commands with rich output

Version: 1.0.0
"""

__version__ = "1.0.0"
