import asyncio
import logging
import sys
from pprint import pformat as pf

from fritzer import BoxConfig, Credentials, Fritzbox

logging.basicConfig(level=logging.DEBUG)

if len(sys.argv) < 3:
    print("%s <url> <password> [username]" % sys.argv[0])
    sys.exit(1)


async def main():
    username = sys.argv[3] if len(sys.argv) > 3 else None
    config = BoxConfig(
        sys.argv[1], credentials=Credentials(username=username, password=sys.argv[2])
    )
    async with Fritzbox(config) as box:
        info = await box.connect()
        logging.info("Users: %s", [user.username for user in info.users])
        logging.info("Rights: %s", pf(info.rights))
        logging.info("== Switches ==")
        for switch in await box.get_switches():
            logging.info("%s: %s", switch.ain, switch.name)


asyncio.run(main())
