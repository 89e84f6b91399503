#!/usr/bin/env python3
"""
Anchor Transition Tables
========================
The two fixed Markov models at the ends of the drift axis.

Each table maps the previous symbol (the boundary '#' included) to a row of
next-symbol weights. Rows are authored independently and do not share key
sets: the past anchor drops the liquids 'r'/'l' and the nasals after vowels.
"""

# Anchor A (drift = 0)
P_PRESENT = {
    '#': {'p': .34, 't': .33, 'k': .2, 's': .13},
    'p': {'a': .35, 'i': .2, 'u': .15, 'r': .1, 'l': .1, '#': .1},
    't': {'a': .35, 'i': .25, 'u': .1, 'r': .1, 'l': .1, '#': .1},
    'k': {'a': .4, 'i': .15, 'u': .15, 'r': .1, 'l': .1, '#': .1},
    's': {'a': .25, 'i': .25, 'u': .15, 'r': .15, 'l': .1, '#': .1},
    'm': {'#': .5, 'a': .25, 'i': .15, 'u': .1},
    'n': {'#': .5, 'a': .25, 'i': .15, 'u': .1},
    'a': {'m': .15, 'n': .15, 'p': .2, 't': .15, 'k': .15, 's': .1, '#': .1},
    'i': {'m': .15, 'n': .15, 'p': .1, 't': .2, 'k': .1, 's': .2, '#': .1},
    'u': {'m': .15, 'n': .15, 'p': .2, 't': .1, 'k': .2, 's': .1, '#': .1},
}

# Anchor B (drift = 1)
P_PAST = {
    '#': {'p': .38, 't': .38, 'k': .14, 's': .10},
    'p': {'a': .45, 'i': .2, 'u': .2, '#': .15},
    't': {'a': .45, 'i': .25, '#': .3},
    'k': {'a': .5, 'i': .2, '#': .3},
    's': {'a': .35, 'i': .3, '#': .35},
    'm': {'#': .65, 'a': .2, 'i': .15},
    'n': {'#': .65, 'a': .2, 'i': .15},
    'a': {'p': .2, 't': .2, 'k': .2, 's': .2, '#': .2},
    'i': {'p': .15, 't': .25, 'k': .15, 's': .25, '#': .2},
    'u': {'p': .25, 't': .15, 'k': .25, 's': .15, '#': .2},
}
