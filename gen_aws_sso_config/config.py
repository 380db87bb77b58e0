"""
Copyright 2016-present Nike, Inc.
Licensed under the Apache License, Version 2.0 (the "License");
You may not use this file except in compliance with the License.
You may obtain a copy of the License at
      http://www.apache.org/licenses/LICENSE-2.0
Unless required by applicable law or agreed to in writing, software
distributed under the License is distributed on an "AS IS" BASIS,
WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
See the License for the specific language governing permissions and* limitations under the License.*
"""
import argparse
from collections import namedtuple

from . import errors, version

DEFAULT_SSO_SESSION_NAME = 'my-sso'
DEFAULT_CLIENT_NAME = 'gen-aws-sso-config'

Parameters = namedtuple(
    'Parameters',
    'start_url, sso_region, sso_session_name, strict, open_browser, confirm_timeout, client_name'
)


def _positive_float(value):
    try:
        seconds = float(value)
    except ValueError:
        raise argparse.ArgumentTypeError('{!r} is not a number'.format(value))
    if seconds <= 0:
        raise argparse.ArgumentTypeError('must be greater than zero, got {}'.format(value))
    return seconds


class Config(object):
    """
       The Config Class reads the CLI arguments, falls back to environment
       variables for the values that were not passed, and hands the result
       over as an immutable Parameters tuple.
    """

    envvar_conf_map = {
        'AWS_SSO_START_URL': 'start_url',
        'AWS_SSO_REGION': 'sso_region',
        'AWS_SSO_SESSION_NAME': 'sso_session_name',
    }

    STRICT_ENVVAR = 'GEN_AWS_SSO_CONFIG_STRICT'

    def __init__(self, gac_ui):
        """
        :type gac_ui: ui.UserInterface
        """
        self.ui = gac_ui
        self.start_url = None
        self.sso_region = None
        self.sso_session_name = DEFAULT_SSO_SESSION_NAME
        self.strict = False
        self.open_browser = True
        self.confirm_timeout = None
        self.client_name = DEFAULT_CLIENT_NAME
        self._parser = self._build_parser()

    @staticmethod
    def _build_parser():
        parser = argparse.ArgumentParser(
            prog='gen-aws-sso-config',
            description="Generates ~/.aws/config profiles for every account and role "
                        "your IAM Identity Center user can access"
        )
        parser.add_argument(
            '--start-url', '-u',
            help="AWS SSO start URL, e.g. https://my-org.awsapps.com/start. "
                 "Can also be set via the AWS_SSO_START_URL env variable."
        )
        parser.add_argument(
            '--sso-region', '-r',
            help="AWS region of the IAM Identity Center instance. "
                 "Can also be set via the AWS_SSO_REGION env variable."
        )
        parser.add_argument(
            '--sso-session-name', '-s',
            help="The sso_session identifier to use in your config file (default: {}). "
                 "Can also be set via the AWS_SSO_SESSION_NAME env variable.".format(DEFAULT_SSO_SESSION_NAME)
        )
        parser.add_argument(
            '--strict',
            action='store_true',
            help="Stop with a non-zero exit code on the first AWS error instead of "
                 "reporting it and carrying on."
        )
        parser.add_argument(
            '--no-browser',
            dest='open_browser',
            action='store_false',
            help="Only print the verification URL, do not try to open a browser."
        )
        parser.add_argument(
            '--confirm-timeout',
            type=_positive_float,
            metavar='SECONDS',
            help="Give up if the login is not confirmed within SECONDS. "
                 "Without it the tool waits for ENTER indefinitely."
        )
        parser.add_argument(
            '--client-name',
            help="Name used when registering the OIDC client (default: {}).".format(DEFAULT_CLIENT_NAME)
        )
        parser.add_argument(
            '--version', action='version',
            version='%(prog)s {}'.format(version),
            help='gen-aws-sso-config version')
        return parser

    @property
    def usage(self):
        return self._parser.format_usage().rstrip('\n')

    def get_args(self):
        """Get the CLI args, then fill the gaps from the environment"""
        args = self._parser.parse_args(self.ui.args)

        for envvar, attr in self.envvar_conf_map.items():
            if getattr(args, attr) is None and self.ui.environ.get(envvar):
                setattr(args, attr, self.ui.environ.get(envvar))

        self.start_url = args.start_url
        self.sso_region = args.sso_region
        if args.sso_session_name:
            self.sso_session_name = args.sso_session_name
        if args.client_name:
            self.client_name = args.client_name

        self.strict = args.strict or str(self.ui.environ.get(self.STRICT_ENVVAR, '')).lower() in ('1', 'true', 'yes')
        self.open_browser = args.open_browser
        self.confirm_timeout = args.confirm_timeout

        missing = [flag for flag, value in (('--start-url', self.start_url), ('--sso-region', self.sso_region))
                   if not value]
        if missing:
            raise errors.UsageError('{}\n{}: error: the following arguments are required: {}'.format(
                self.usage, self._parser.prog, ', '.join(missing)))

    def parameters(self):
        """
        :rtype: Parameters
        """
        return Parameters(
            start_url=self.start_url,
            sso_region=self.sso_region,
            sso_session_name=self.sso_session_name,
            strict=self.strict,
            open_browser=self.open_browser,
            confirm_timeout=self.confirm_timeout,
            client_name=self.client_name,
        )
