from setuptools import setup, find_packages

setup(
    name="aes256_encryption",
    version="1.0.0",
    packages=find_packages(exclude=["tests", "tests.*"]),
    install_requires=[
        "cryptography>=41.0.0",
        "python-dotenv>=1.0.0",
        "prometheus-client>=0.17.0",
    ],
    extras_require={
        "test": [
            "pytest>=7.0.0",
            "pytest-mock>=3.10.0",
        ],
    },
    python_requires='>=3.8',
)
