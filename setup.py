from setuptools import setup, find_packages

setup(
    name="virtual-currency-common",
    version="1.0.0",
    packages=find_packages(where="src"),
    package_dir={"": "src"},
    install_requires=[
        "web3>=6.5.0",
        "eth-utils>=2.1.0",
        "eth-abi>=4.0.0",
        "base58>=2.1.0",
        "requests>=2.28.0",
        "pydantic>=2.0.0",
        "pydantic-settings>=2.0.0",
    ],
    extras_require={
        "test": [
            "pytest>=7.0.0",
        ],
    },
    python_requires=">=3.8",
    description="Unified transaction and balance lookups for EVM and Tron platforms",
)
