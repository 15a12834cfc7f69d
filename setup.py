import setuptools

with open("README.md", "r") as fh:
    long_description = fh.read()

setuptools.setup(
    name="RVmail",
    version="0.1",
    author="Ralph Verwijmeren",
    author_email="ralph@ralver.nl",
    description="Address-list parsing and recipient handling for mail sent through Microsoft Graph",
    long_description=long_description,
    long_description_content_type="text/markdown",
    packages=setuptools.find_packages(exclude=["tests", "tests.*"]),
    classifiers=[
        "Programming Language :: Python :: 3",
        "License :: OSI Approved :: MIT License",
        "Operating System :: OS Independent",
    ],
    python_requires='>=3.9',
    install_requires=[
        'requests',
        'msal',
        'python-dotenv',
    ],
    extras_require={
        'test': [
            'pytest',
        ],
    },
)
