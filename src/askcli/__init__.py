"""
askcli - terse command-line answers from Gemini.

Joins everything on the command line into a question, sends it to the
Gemini generateContent endpoint and prints a one-line, shell-ready answer.

Usage:
    export GEMINI_API_KEY=...
    askcli find files larger than 100MB
    askcli undo the last git commit but keep changes
"""

__version__ = "1.0.0"
__author__ = "askcli contributors"
