""" Define the setup instructions for this package """
import os
import setuptools


def version():
    """ Returns the version from lvlog.__version__ """
    about = {}
    with open(os.path.join(os.path.dirname(__file__), "lvlog", "__version__.py")) as f:
        exec(f.read(), about)  # pylint: disable=exec-used
    return about["__version__"]


def long_description():
    """ Returns the README as the long descripion for this package """
    with open(os.path.join(os.path.dirname(__file__), 'README.md')) as f:
        return '\n' + f.read()


def requirements():
    """ Returns the requirements.txt file as the install_requires for this package """
    with open(os.path.join(os.path.dirname(__file__), 'requirements.txt')) as f:
        return [line.strip() for line in f if line.strip()]


setuptools.setup(
    name='lvlog',
    version=version(),
    description='Leveled logging with multi-sink fan-out and a swappable process-wide logger',
    long_description=long_description(),
    long_description_content_type='text/markdown',
    python_requires='>=3.8.0',
    packages=setuptools.find_packages(exclude=['*.tests', '*.tests.*', 'tests.*', 'tests']),
    install_requires=requirements(),
    extras_require={
        'test': ['pytest'],
    },
    license='MIT',
    classifiers=[
        'Development Status :: 3 - Alpha',
        'Environment :: Console',
        'Intended Audience :: Developers',
        'License :: OSI Approved :: MIT License',
        'Natural Language :: English',
        'Operating System :: POSIX :: Linux',
        'Programming Language :: Python',
        'Programming Language :: Python :: 3 :: Only',
        'Programming Language :: Python :: 3.8',
        'Topic :: System :: Logging',
        'Typing :: Typed',
    ],
)
