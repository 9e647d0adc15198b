"""Dice Dungeon: a turn-based dice and card dungeon crawl."""
