import pathlib

import setuptools

here = pathlib.Path(__file__).parent.resolve()

long_description = (here / "README.md").read_text(encoding="utf-8")

setuptools.setup(
    name="algotx",
    version="0.1.0",
    description="Build, price and group Algorand transactions",
    long_description=long_description,
    long_description_content_type="text/markdown",
    license="MIT",
    classifiers=[
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: Implementation :: CPython",
        "License :: OSI Approved :: MIT License",
    ],
    package_dir={"": "src"},
    packages=setuptools.find_packages(where="src"),
    package_data={"algotx": ["logger.cfg", "py.typed"]},
    python_requires=">=3.10",
    install_requires=[
        "ethereum-types>=0.2.1,<0.3",
        "pydantic>=2.6,<3",
        "pynacl>=1.5,<2",
        "py-algorand-sdk>=2.0,<3",
    ],
    extras_require={
        "test": [
            "pytest>=8,<9",
            "msgpack>=1.0,<2",
        ],
    },
)
