"""
termball_sim2d - Simulasi bola memantul 2D yang dirender ke terminal.

Package ini memisahkan 3 layer utama:
  1. Physics Engine    → koordinat pixel grid (vector, ball_model)
  2. Renderer          → rasterizer lingkaran + sub-cell packing ke teks
  3. Terminal Interface → redraw in-place dengan escape code + frame pacing
"""
