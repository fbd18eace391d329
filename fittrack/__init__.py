# -*- coding: utf-8 -*-
"""FitTrack backend: accounts, free-text workout logging and calorie stats."""
