"""Cut a flat RGB image buffer into tiles without copying pixels."""

import array
import logging

from slicendice import view


logging.basicConfig(level=logging.INFO)
logger = logging.getLogger("image_tiles")

height, width, channels = 6, 8, 3
tile_size = 2

# a flat row-major buffer as returned by most image decoders
pixels = array.array('B', (i % 256 for i in range(height * width * channels)))
image = view(pixels, (height, width, channels))

# red channel, every other row
red = image[::2, :, 0]
logger.info("red channel of even rows:\n%s", red)

# tiles are views on the same buffer
tiles = [image["{}:{}, {}:{}".format(y, y + tile_size, x, x + tile_size)]
         for y in range(0, height, tile_size)
         for x in range(0, width, tile_size)]
logger.info("%d tiles of shape %s", len(tiles), tiles[0].dimensions)

# writes through a tile land in the image buffer
tiles[-1][:, :, 1] = [255] * (tile_size * tile_size)
logger.info("last tile green channel:\n%s", tiles[-1][:, :, 1])
logger.info("buffer value at the last pixel: %s", pixels[-2])

# flatten a tile for a model expecting vectors
vector = tiles[0].reshape(tile_size * tile_size * channels)
logger.info("first tile as a vector: %s", vector.to_string(flat=True))
