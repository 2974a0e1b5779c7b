"""
News source registry feature.
"""
