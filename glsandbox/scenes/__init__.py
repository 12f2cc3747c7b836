"""Demo scenes: clear colour, polygon, shader art, and pyramids seen through a camera."""