from setuptools import setup

with open("README.md") as f:
    readme = f.read()

about = {}
with open("osm_router/_version.py") as f:
    exec(f.read(), about)

setup(
    name=about["__title__"],
    version=about["__version__"],
    description=about["__description__"],
    long_description=readme,
    long_description_content_type="text/markdown",
    author=about["__author__"],
    author_email=about["__author_email__"],
    url=about["__url__"],
    license=about["__license__"],
    packages=[
        "osm_router",
        "osm_router.maps",
        "osm_router.maps.a_star",
        "osm_router.network",
        "osm_router.routing",
        "osm_router.observer",
    ],
    install_requires=[
        "openlr==1.0.1",
        "geographiclib",
        "shapely",
        "numpy",
    ],
    test_suite="tests",
    python_requires=">=3.8",
    classifiers=[
        "Intended Audience :: Developers",
        "Natural Language :: English",
        "License :: OSI Approved :: Apache Software License",
        "Programming Language :: Python",
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: Implementation :: CPython",
        "Programming Language :: Python :: Implementation :: PyPy",
    ],
)
