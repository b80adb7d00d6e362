from setuptools import setup
from setuptools.command.install import install


class CustomInstallCommand(install):
    def run(self):
        install.run(self)
        print("\nInstallation complete!")
        print("Usage: from argv_utils import Argv\n")


setup(
    name="argv-utils",
    version="0.1.0",
    description="Command-line argument parsing with typed short/long options and localizable errors.",
    python_requires=">=3.8",
    package_dir={"": "src"},
    packages=["argv_utils"],
    install_requires=[
        "prettytable",
        "termcolor"
    ],
    extras_require={
        "test": [
            "pytest"
        ]
    },
    cmdclass={
        "install": CustomInstallCommand
    }
)
