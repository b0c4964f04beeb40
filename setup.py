from setuptools import find_packages, setup

if __name__ == "__main__":
    setup(
        name="typedsign",
        version="0.1.0",
        description="EIP-712 typed data hashing and signing",
        packages=find_packages(where="src"),
        package_dir={"": "src"},
        python_requires=">=3.10",
        install_requires=["msgspec"],
        extras_require={"test": ["pytest"]},
    )
