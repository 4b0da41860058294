"""Basic example demonstrating PersonRecord.

Shows how a caller handles the absent description and the fallible
risky_method.
"""

from person_record import GenericFailure, PersonRecord, call_risky


def main() -> None:
    """Run the basic example."""
    print("=" * 60)
    print("person_record - Basic Example")
    print("=" * 60)

    # Example 1: Construction and mutation
    print("\n1. Construction and mutation:")
    person = PersonRecord("Ann", 30)
    print(f"   Created: {person}")
    person.set_age(31)
    print(f"   After set_age: {person}")

    # Example 2: Optional result
    print("\n2. Optional description:")
    description = person.get_description()
    print(f"   {description if description is not None else 'No description available'}")

    # Example 3: Varargs
    print("\n3. Concatenate:")
    print(f"   {person.concatenate('Hello', 'from', 'Python')!r}")

    # Example 4: Fallible call, both styles
    print("\n4. Risky method:")
    try:
        print(f"   Raised style: {person.risky_method()}")
    except GenericFailure as e:
        print(f"   Raised style: caught {e}")
    result = call_risky(person)
    print(f"   Result style: success={result.success} value={result.value} error={result.error}")

    # Example 5: Static method and collections
    print("\n5. Static greeting and collections:")
    print(f"   {PersonRecord.static_greeting()}")
    print(f"   Names: {person.get_names()}")
    print(f"   Scores: {person.get_scores()}")

    print("\n" + "=" * 60)
    print("Example completed!")
    print("=" * 60)


if __name__ == "__main__":
    main()
