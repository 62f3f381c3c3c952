"""Setup script for the videoplayer command processor."""

from setuptools import setup, find_namespace_packages

setup(
    name="videoplayer",
    version="0.1.0",
    description="In-memory video library with playback, playlists, search and flagging",
    package_dir={"": "src"},
    packages=find_namespace_packages(where="src"),
    package_data={"videoplayer": ["data/*.txt"]},
    python_requires=">=3.8",
    install_requires=[
        "google-api-python-client>=2.0.0",
        "google-auth-oauthlib>=0.4.0",
        "python-dotenv>=0.19.0",
    ],
    extras_require={
        "test": ["pytest>=7.0"],
    },
    entry_points={
        "console_scripts": [
            "videoplayer=videoplayer.cli:main",
        ]
    },
)
