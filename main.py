import asyncio
import config

from browser import MajorBrowser
from classes import Institution
from institutions import clear_institutions, display_name, find_institution, institutions_in_system


def choose(prompt: str, count: int) -> int:
    while True:
        choice = input(prompt).strip()

        if choice.isdigit() and 1 <= int(choice) <= count:
            return int(choice) - 1

        print(f"Enter a number between 1 and {count}.")


def system_input() -> str:
    for i, system in enumerate(config.SYSTEMS, 1):
        print(f"{i}: {system}")

    return config.SYSTEMS[choose("Select a California school system: ", len(config.SYSTEMS))]


def institution_input(institutions: list[Institution], system: str) -> Institution | None:
    desired_institutions = institutions_in_system(institutions, system)
    if not desired_institutions:
        print(f"No institutions found for {system}.")
        return None

    for i, institution in enumerate(desired_institutions, 1):
        print(f"{i}: {display_name(institution, system)}")

    return desired_institutions[choose("Select the number of the institution: ", len(desired_institutions))]


def print_majors(majors: list[str], selected_major: str) -> None:
    if not majors:
        print("No matches")
        return

    for i, major in enumerate(majors, 1):
        marker = "*" if major == selected_major else " "
        print(f"{marker}{i}: {major}")


def major_input(browser: MajorBrowser) -> None:
    while True:
        print(f"\nSelected major: {browser.selected_major or '(none)'}")
        print_majors(browser.filtered_majors, browser.selected_major)

        answer = input("Filter majors, pick one by number, or press enter to go back: ").strip()
        if not answer:
            break

        shown = browser.filtered_majors
        if answer.isdigit() and 1 <= int(answer) <= len(shown):
            browser.pick_major(shown[int(answer) - 1])
        else:
            browser.query = answer


def main():
    browser = MajorBrowser()

    print("== Reverse Assist ==")
    if asyncio.run(browser.start()):
        institution = find_institution(browser.institutions, browser.receiving_id)
        if institution is not None:
            print(f"Showing majors for {display_name(institution, config.DEFAULT_SYSTEM)} (ID {institution.id}).")
    else:
        print("Could not load the default institution.")

    try:
        while True:
            if browser.majors:
                major_input(browser)

            system = system_input()
            institution = institution_input(browser.institutions, system)

            if institution is not None:
                print(f"Getting majors for {display_name(institution, system)} (ID {institution.id}).")
                asyncio.run(browser.select_institution(institution.id))

                if not browser.majors:
                    print("No majors have agreements with this institution.")

            proceed = input("\nContinue? (y/n) ")
            if proceed.lower() != "y":
                break
    finally:
        browser.close()
        clear_institutions()


if __name__ == "__main__":
    main()
