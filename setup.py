from setuptools import setup, find_packages
import re

# Read version from ui19export/__init__.py
with open('ui19export/__init__.py') as f:
    version = re.search(r'^__version__ = ["\']([^"\']+)["\']', f.read(), re.MULTILINE).group(1)

setup(
    name='ui19-export',
    version=version,
    packages=find_packages(include=['ui19export', 'ui19export.*']),
    install_requires=[
        'PyYAML>=6.0',
        'click>=8.0',
        'pydantic>=2.0.0',
        'rich>=13.0',
    ],
    extras_require={
        'mcp': [
            'mcp[cli]>=1.0.0,<2',
        ],
        'test': [
            'pytest>=7.0',
        ],
    },
    entry_points={
        'console_scripts': [
            'ui19-export=ui19export.cli.__main__:main',
            'ui19-export-mcp=ui19export.mcp.server:run_server',
        ],
    },
    author='Personal',
    description='UIF UI-19 declaration exports for payroll, accounting and tax systems.',
    python_requires='>=3.10',
)
