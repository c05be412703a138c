from setuptools import setup, find_packages

setup(
    name='device_monitor',
    version='1.0.0',
    author='bb-Ricardo',
    author_email='ricardo@bitchbrothers.com',
    description='A collection of device monitoring drivers which report device data as tables via Redfish, SOAP or SSH.',
    long_description=open('README.md').read(),
    long_description_content_type='text/markdown',
    packages=find_packages(exclude=['tests', 'tests.*']),
    install_requires=[
        'redfish>=3.1.0',
        'requests>=2.25.0',
        'urllib3>=1.26.0',
        'beautifulsoup4>=4.9.0',
        'lxml>=4.6.0',
        'paramiko>=2.7.0',
    ],
    extras_require={
        'test': [
            'pytest>=6.0',
        ],
    },
    classifiers=[
        'License :: OSI Approved :: MIT License',
        'Operating System :: OS Independent',
        "Environment :: Console",
        'Programming Language :: Python :: 3',
        "Topic :: System :: Monitoring",
    ],
    python_requires='>=3.7',
    py_modules=["device_monitor"],
    entry_points={
        'console_scripts': [
            'device_monitor=device_monitor:main',
        ],
    },
)
