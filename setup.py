from setuptools import setup, find_packages

setup(
    name="seamrpc",
    version="0.1.0",
    description="SeamRPC - JSON-RPC 1.0/2.0 protocol engine with pluggable transports",
    author="SeamRPC Team",
    packages=find_packages(exclude=["tests", "tests.*", "examples"]),
    install_requires=[
        "pyzmq>=24.0.0",
        "httpx>=0.24.0",
        "opentelemetry-api>=1.14.0",
        "opentelemetry-sdk>=1.14.0",
        "opentelemetry-exporter-otlp>=1.14.0",
    ],
    extras_require={
        "dev": [
            "pytest>=7.0.0",
            "pytest-cov",
            "black",
            "isort",
            "pylint",
        ],
    },
    python_requires=">=3.9",
)
