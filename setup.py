"""Setup script for Monitoring Plugin."""

from setuptools import setup, find_packages
import os

# Read the README file
def read_readme():
    readme_path = os.path.join(os.path.dirname(__file__), 'README.md')
    if os.path.exists(readme_path):
        with open(readme_path, 'r', encoding='utf-8') as f:
            return f.read()
    return "Monitoring Plugin - performance data for Nagios/Icinga check plugins"

setup(
    name='monitoring-plugin-perfdata',
    version='0.1.0',
    description='Validation and rendering of Nagios/Icinga plugin performance data',
    long_description=read_readme(),
    long_description_content_type='text/markdown',
    author='Monitoring Plugin Team',
    author_email='dev@example.com',
    url='https://github.com/your-org/monitoring-plugin-perfdata',

    packages=find_packages(include=['monitoring_plugin', 'monitoring_plugin.*']),
    python_requires='>=3.8',
    install_requires=[
        'pydantic>=2.0.0',
        'click>=8.1.0',
        'python-dotenv>=1.0.0',
    ],

    extras_require={
        'yaml': ['pyyaml>=6.0'],
        'dev': [
            'pytest>=7.4.0',
            'pytest-cov>=4.1.0',
            'pyyaml>=6.0',
            'black>=23.0.0',
            'flake8>=6.0.0',
            'mypy>=1.5.0',
        ],
    },

    entry_points={
        'console_scripts': [
            'check-perfdata=monitoring_plugin.cli:cli',
        ],
    },

    classifiers=[
        'Development Status :: 3 - Alpha',
        'Intended Audience :: System Administrators',
        'Topic :: System :: Systems Administration',
        'Topic :: System :: Monitoring',
        'License :: OSI Approved :: MIT License',
        'Programming Language :: Python :: 3',
        'Programming Language :: Python :: 3.8',
        'Programming Language :: Python :: 3.9',
        'Programming Language :: Python :: 3.10',
        'Programming Language :: Python :: 3.11',
        'Programming Language :: Python :: 3.12',
    ],

    keywords='nagios icinga checkmk monitoring plugin performance-data perfdata',

    project_urls={
        'Bug Reports': 'https://github.com/your-org/monitoring-plugin-perfdata/issues',
        'Source': 'https://github.com/your-org/monitoring-plugin-perfdata',
    },

    include_package_data=True,
    zip_safe=False,
)
