"""
Survival report client.

Finds out roughly where this device is and posts it to a relay endpoint with
the pin on the current position, which ends up in the chat channel as a map
link.

Run:
    location-relay-report --endpoint http://localhost:8000/post
    location-relay-report --lat 35.6899668 --lon 139.6884758
"""

import argparse
import logging
import os
import sys

import requests
from dotenv import load_dotenv

DEFAULT_ENDPOINT = 'http://localhost:8000/post'
GEOLOCATION_URL = 'http://ip-api.com/json/'
REPORT_ZOOM = 15
REPORT_MESSAGE = '生存報告です！'


class ClientError(Exception):
    pass


def build_survival_report(latitude, longitude):
    """Request body for a survival report: pinned at the current position, zoom 15."""
    return {
        "latitude": latitude,
        "longitude": longitude,
        "pinLatitude": latitude,
        "pinLongitude": longitude,
        "zoom": REPORT_ZOOM,
        "message": REPORT_MESSAGE,
    }


def locate_device(geolocation_url=GEOLOCATION_URL):
    """
    Approximate the device position from its public IP address.

    :return: Tuple (latitude, longitude).
    :raises ClientError: if the lookup fails.
    """
    try:
        response = requests.get(geolocation_url)
        response.raise_for_status()
        data = response.json()
    except (requests.RequestException, ValueError) as e:
        raise ClientError(f"Geolocation failed: {e}") from e

    if data.get('status') != 'success':
        raise ClientError(f"Geolocation failed: {data.get('message', 'unknown error')}")
    return data['lat'], data['lon']


def post_location(endpoint, latitude, longitude):
    """
    Send a survival report to the relay.

    :return: Decoded JSON response ({"message", "url"}).
    :raises ClientError: on network failure or a non-2xx answer.
    """
    try:
        response = requests.post(endpoint, json=build_survival_report(latitude, longitude))
    except requests.RequestException as e:
        raise ClientError(f"Request failed: {e}") from e

    if not response.ok:
        try:
            detail = response.json().get('error', response.text)
        except ValueError:
            detail = response.text
        raise ClientError(f"Relay answered {response.status_code}: {detail}")
    return response.json()


def build_parser():
    parser = argparse.ArgumentParser(prog="location-relay-report", description="Send a survival report.")
    parser.add_argument("--endpoint", default=os.getenv('RELAY_ENDPOINT', DEFAULT_ENDPOINT))
    parser.add_argument("--lat", type=float, help="Latitude; looked up from the IP address when omitted")
    parser.add_argument("--lon", type=float, help="Longitude; looked up from the IP address when omitted")
    return parser


def main(argv=None):
    load_dotenv()
    logging.basicConfig(level=logging.INFO, format="%(asctime)s - %(levelname)s - %(message)s")

    parser = build_parser()
    args = parser.parse_args(argv)
    if (args.lat is None) != (args.lon is None):
        parser.error("--lat and --lon must be given together")

    try:
        if args.lat is None:
            latitude, longitude = locate_device()
        else:
            latitude, longitude = args.lat, args.lon
        result = post_location(args.endpoint, latitude, longitude)
    except ClientError as e:
        logging.error(f"Error: {e}")
        print('送信に失敗しました')
        return 1

    logging.info(f"Map URL: {result.get('url')}")
    print('送信しました！')
    return 0


if __name__ == "__main__":
    sys.exit(main())
