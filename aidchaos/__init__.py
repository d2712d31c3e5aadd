"""AidChaos: attribute-driven outcome rolls for AI-narrated interactive fiction.

Player actions are scanned for attributes (Strength, Dexterity, ...) by name
or trigger word, each relevant attribute gets a d100 roll weighted by the
character's score, and the narrator receives a guidance block describing the
outcomes without exposing the mechanics. See aidchaos.pipeline for the turn
flow.
"""

__version__ = "0.9.1"
