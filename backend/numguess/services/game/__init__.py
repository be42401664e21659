"""Game domain services: reward rules and the one-attempt flow.

The reward engine is pure and takes the expected pair as an argument.
The attempt service owns persistence; HTTP routes and socket handlers
only translate its results and errors.
"""
