from setuptools import find_packages, setup

setup(
    name="mongo-autoload",
    version="0.1.0",
    description="aiohttp plugin that connects to MongoDB and autoloads schema models from a folder",
    packages=find_packages(include=["mongo_autoload", "mongo_autoload.*"]),
    python_requires=">=3.10",
    install_requires=[
        "aiohttp>=3.9",  # Host web framework (web.AppKey)
        "pymongo",  # MongoDB
        "pydantic>=2",  # Options and schema validation
    ],
    extras_require={
        "test": [
            "mongomock",  # In-memory MongoDB for tests
            "pytest>=7.0",  # Testing framework
            "pytest-timeout>=2.1",  # Test timeouts
        ],
    },
)
