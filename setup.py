from setuptools import setup

# Get long description from the README.rst file.
with open("README.rst") as file:
    LONG_DESC = file.read()

# Get version number from the module's __init__.py file.
with open("./src/ldapencoder/__init__.py") as src:
    VER = [
        line.split('"')[1] for line in src.readlines() if line.startswith("__version__")
    ][0]

setup(
    name="ldapencoder",
    version=VER,
    description="Escaping untrusted values for LDAP search filters and DNs.",
    long_description=LONG_DESC,
    long_description_content_type="text/x-rst",
    license="MIT",
    package_dir={"": "src"},
    package_data={"ldapencoder": ["py.typed"]},
    packages=["ldapencoder"],
    include_package_data=True,
    python_requires=">=3.8",
    extras_require={
        "test": ["pytest>=6.0", "ldap3>=2.9"],
    },
    keywords=[
        "python3",
        "ldap",
        "rfc4514",
        "rfc4515",
        "escaping",
        "ldap-injection",
        "security",
    ],
    classifiers=[
        "Development Status :: 5 - Production/Stable",
        "Intended Audience :: Developers",
        "Intended Audience :: System Administrators",
        "License :: OSI Approved :: MIT License",
        "Operating System :: OS Independent",
        "Programming Language :: Python :: 3 :: Only",
        "Programming Language :: Python :: 3.8",
        "Programming Language :: Python :: 3.9",
        "Programming Language :: Python :: 3.10",
        "Programming Language :: Python :: 3.11",
        "Programming Language :: Python :: 3.12",
        "Topic :: Security",
        "Topic :: Software Development :: Libraries :: Python Modules",
        "Topic :: System :: Systems Administration :: Authentication/Directory :: LDAP",
    ],
)
