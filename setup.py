from pathlib import Path
from setuptools import find_packages, setup
from setuptools.command.install import install
import stat
import sys


class InstallShBundle(install):
    """Install shbundle and make sure the console launcher is executable."""

    def run(self):
        super().run()

        scripts_dir = Path(self.install_scripts or "")
        launcher = scripts_dir / "shbundle"
        if not launcher.exists():
            print(f"shbundle launcher not found in {scripts_dir}", file=sys.stderr)
            return

        launcher.chmod(launcher.stat().st_mode | stat.S_IXUSR)
        print(f"✔ shbundle installed at {launcher}")


setup(
    name="shbundle",
    version="0.3.0",
    description="Bundle a bash script and everything it sources into a single file",
    author="GAHEOS",
    python_requires=">=3.9",
    package_dir={"": "src"},
    packages=find_packages(where="src"),
    install_requires=[
        "tree-sitter>=0.23",
        "tree-sitter-bash>=0.23",
    ],
    extras_require={
        "test": ["pytest>=7"],
    },
    entry_points={
        "console_scripts": ["shbundle=shbundle.cli:main"],
    },
    cmdclass={"install": InstallShBundle},
)
