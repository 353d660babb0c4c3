"""Minr: strip-mining control engine for autonomous mining turtles."""
