"""
PyGame front end for Ping Pong
"""
