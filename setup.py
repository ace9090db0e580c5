import setuptools

setuptools.setup(
    name="genesys_card_browser",
    version="1.0.0",
    description="Genesys Card Browser: filter and sort Yu-Gi-Oh! card points datasets",
    packages=["utils", "services", "repositories", "controllers"],
    py_modules=["main"],
    classifiers=["Programming Language :: Python :: 3"],
    python_requires=">=3.11",
    install_requires=[
        "loguru",
    ],
    extras_require={
        "test": ["pytest"],
    },
    entry_points={
        "console_scripts": ["card-browser=main:main"],
    },
)
