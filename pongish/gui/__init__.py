"""
PyGame front end of Pongish
"""
