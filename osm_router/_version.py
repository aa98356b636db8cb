__title__ = "osm-router"
__description__ = "A* shortest paths on road networks built from OpenStreetMap data"
__url__ = ""
__version__ = "0.1.0"
__author__ = "osm-router contributors"
__author_email__ = ""
__license__ = "Apache License 2.0"
