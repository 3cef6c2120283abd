"""
Semantic tags: machine-readable annotations written under the "semantics" key.

Each tag class owns a fixed property name and knows how to write its value.
Tags are kept in insertion order and are not de-duplicated.
"""

from datetime import datetime
from decimal import Decimal
from typing import Dict, Iterator, List, Optional, Union

from .utils import format_date
from .writer import JsonWriter


class SemanticTag:
    """Base class for all semantic tags."""

    tag_name: str = ""

    def write(self, writer: JsonWriter) -> None:
        writer.write_property_name(self.tag_name)
        self.write_value(writer)

    def write_value(self, writer: JsonWriter) -> None:
        raise NotImplementedError


class StringSemanticTag(SemanticTag):
    def __init__(self, value: str):
        self.value = value

    def write_value(self, writer: JsonWriter) -> None:
        writer.write_value(self.value)


class NumberSemanticTag(SemanticTag):
    def __init__(self, value: Union[int, Decimal]):
        self.value = value

    def write_value(self, writer: JsonWriter) -> None:
        writer.write_value(self.value)


class BooleanSemanticTag(SemanticTag):
    def __init__(self, value: bool):
        self.value = value

    def write_value(self, writer: JsonWriter) -> None:
        writer.write_value(bool(self.value))


class DateSemanticTag(SemanticTag):
    """Date tag rendered with the same Z / ±HH:MM rule as date fields."""

    def __init__(self, value: datetime):
        self.value = value

    def write_value(self, writer: JsonWriter) -> None:
        writer.write_value(format_date(self.value))


class StringListSemanticTag(SemanticTag):
    def __init__(self, values: List[str]):
        self.values = list(values)

    def write_value(self, writer: JsonWriter) -> None:
        writer.write_start_array()
        for value in self.values:
            writer.write_value(value)
        writer.write_end_array()


class CurrencyAmountSemanticTag(SemanticTag):
    """Amount plus ISO 4217 currency code. The amount is written as a string."""

    def __init__(self, amount: str, currency_code: str):
        self.amount = amount
        self.currency_code = currency_code

    def write_value(self, writer: JsonWriter) -> None:
        writer.write_start_object()
        writer.write_property_name("amount")
        writer.write_value(str(self.amount))
        writer.write_property_name("currencyCode")
        writer.write_value(self.currency_code)
        writer.write_end_object()


class LocationSemanticTag(SemanticTag):
    def __init__(self, latitude: float, longitude: float):
        self.latitude = latitude
        self.longitude = longitude

    def write_value(self, writer: JsonWriter) -> None:
        writer.write_start_object()
        writer.write_property_name("latitude")
        writer.write_value(float(self.latitude))
        writer.write_property_name("longitude")
        writer.write_value(float(self.longitude))
        writer.write_end_object()


class PersonNameSemanticTag(SemanticTag):
    """Person name components; only the parts that are set are written."""

    _COMPONENTS = (
        ("name_prefix", "namePrefix"),
        ("given_name", "givenName"),
        ("middle_name", "middleName"),
        ("family_name", "familyName"),
        ("name_suffix", "nameSuffix"),
        ("nickname", "nickname"),
    )

    def __init__(self, given_name: Optional[str] = None, family_name: Optional[str] = None,
                 middle_name: Optional[str] = None, name_prefix: Optional[str] = None,
                 name_suffix: Optional[str] = None, nickname: Optional[str] = None):
        self.given_name = given_name
        self.family_name = family_name
        self.middle_name = middle_name
        self.name_prefix = name_prefix
        self.name_suffix = name_suffix
        self.nickname = nickname

    def write_value(self, writer: JsonWriter) -> None:
        writer.write_start_object()
        for attribute, property_name in self._COMPONENTS:
            value = getattr(self, attribute)
            if value:
                writer.write_property_name(property_name)
                writer.write_value(value)
        writer.write_end_object()


class Seat:
    """One seat entry of the "seats" tag."""

    _PROPERTIES = (
        ("seat_section", "seatSection"),
        ("seat_row", "seatRow"),
        ("seat_number", "seatNumber"),
        ("seat_identifier", "seatIdentifier"),
        ("seat_type", "seatType"),
        ("seat_description", "seatDescription"),
    )

    def __init__(self, seat_section: Optional[str] = None, seat_row: Optional[str] = None,
                 seat_number: Optional[str] = None, seat_identifier: Optional[str] = None,
                 seat_type: Optional[str] = None, seat_description: Optional[str] = None):
        self.seat_section = seat_section
        self.seat_row = seat_row
        self.seat_number = seat_number
        self.seat_identifier = seat_identifier
        self.seat_type = seat_type
        self.seat_description = seat_description

    def write(self, writer: JsonWriter) -> None:
        writer.write_start_object()
        for attribute, property_name in self._PROPERTIES:
            value = getattr(self, attribute)
            if value:
                writer.write_property_name(property_name)
                writer.write_value(value)
        writer.write_end_object()


class Seats(SemanticTag):
    tag_name = "seats"

    def __init__(self, seats: List[Seat]):
        self.seats = list(seats)

    def write_value(self, writer: JsonWriter) -> None:
        writer.write_start_array()
        for seat in self.seats:
            seat.write(writer)
        writer.write_end_array()


class WifiAccess(SemanticTag):
    """Wi-Fi networks available at the venue, as (ssid, password) pairs."""

    tag_name = "wifiAccess"

    def __init__(self, networks: Dict[str, str]):
        self.networks = dict(networks)

    def write_value(self, writer: JsonWriter) -> None:
        writer.write_start_array()
        for ssid, password in self.networks.items():
            writer.write_start_object()
            writer.write_property_name("ssid")
            writer.write_value(ssid)
            writer.write_property_name("password")
            writer.write_value(password)
            writer.write_end_object()
        writer.write_end_array()


# String tags

class AirlineCode(StringSemanticTag):
    tag_name = "airlineCode"


class AwayTeamAbbreviation(StringSemanticTag):
    tag_name = "awayTeamAbbreviation"


class AwayTeamLocation(StringSemanticTag):
    tag_name = "awayTeamLocation"


class AwayTeamName(StringSemanticTag):
    tag_name = "awayTeamName"


class BoardingGroup(StringSemanticTag):
    tag_name = "boardingGroup"


class BoardingSequenceNumber(StringSemanticTag):
    tag_name = "boardingSequenceNumber"


class CarNumber(StringSemanticTag):
    tag_name = "carNumber"


class ConfirmationNumber(StringSemanticTag):
    tag_name = "confirmationNumber"


class DepartureAirportCode(StringSemanticTag):
    tag_name = "departureAirportCode"


class DepartureAirportName(StringSemanticTag):
    tag_name = "departureAirportName"


class DepartureGate(StringSemanticTag):
    tag_name = "departureGate"


class DepartureLocationDescription(StringSemanticTag):
    tag_name = "departureLocationDescription"


class DeparturePlatform(StringSemanticTag):
    tag_name = "departurePlatform"


class DepartureStationName(StringSemanticTag):
    tag_name = "departureStationName"


class DepartureTerminal(StringSemanticTag):
    tag_name = "departureTerminal"


class DestinationAirportCode(StringSemanticTag):
    tag_name = "destinationAirportCode"


class DestinationAirportName(StringSemanticTag):
    tag_name = "destinationAirportName"


class DestinationGate(StringSemanticTag):
    tag_name = "destinationGate"


class DestinationLocationDescription(StringSemanticTag):
    tag_name = "destinationLocationDescription"


class DestinationPlatform(StringSemanticTag):
    tag_name = "destinationPlatform"


class DestinationStationName(StringSemanticTag):
    tag_name = "destinationStationName"


class DestinationTerminal(StringSemanticTag):
    tag_name = "destinationTerminal"


class EventName(StringSemanticTag):
    tag_name = "eventName"


class EventType(StringSemanticTag):
    """One of the PKEventType* values, e.g. PKEventTypeSports."""

    tag_name = "eventType"


class FlightCode(StringSemanticTag):
    tag_name = "flightCode"


class GenreName(StringSemanticTag):
    tag_name = "genre"


class HomeTeamAbbreviation(StringSemanticTag):
    tag_name = "homeTeamAbbreviation"


class HomeTeamLocation(StringSemanticTag):
    tag_name = "homeTeamLocation"


class HomeTeamName(StringSemanticTag):
    tag_name = "homeTeamName"


class LeagueAbbreviation(StringSemanticTag):
    tag_name = "leagueAbbreviation"


class LeagueName(StringSemanticTag):
    tag_name = "leagueName"


class MembershipProgramName(StringSemanticTag):
    tag_name = "membershipProgramName"


class MembershipProgramNumber(StringSemanticTag):
    tag_name = "membershipProgramNumber"


class PriorityStatus(StringSemanticTag):
    tag_name = "priorityStatus"


class SecurityScreening(StringSemanticTag):
    tag_name = "securityScreening"


class SportName(StringSemanticTag):
    tag_name = "sportName"


class TransitProvider(StringSemanticTag):
    tag_name = "transitProvider"


class TransitStatus(StringSemanticTag):
    tag_name = "transitStatus"


class TransitStatusReason(StringSemanticTag):
    tag_name = "transitStatusReason"


class VehicleName(StringSemanticTag):
    tag_name = "vehicleName"


class VehicleNumber(StringSemanticTag):
    tag_name = "vehicleNumber"


class VehicleType(StringSemanticTag):
    tag_name = "vehicleType"


class VenueEntrance(StringSemanticTag):
    tag_name = "venueEntrance"


class VenueName(StringSemanticTag):
    tag_name = "venueName"


class VenuePhoneNumber(StringSemanticTag):
    tag_name = "venuePhoneNumber"


class VenueRoom(StringSemanticTag):
    tag_name = "venueRoom"


# Number and boolean tags

class Duration(NumberSemanticTag):
    """Duration in seconds."""

    tag_name = "duration"


class FlightNumber(NumberSemanticTag):
    tag_name = "flightNumber"


class Silenced(BooleanSemanticTag):
    tag_name = "silenced"


# Date tags

class CurrentArrivalDate(DateSemanticTag):
    tag_name = "currentArrivalDate"


class CurrentBoardingDate(DateSemanticTag):
    tag_name = "currentBoardingDate"


class CurrentDepartureDate(DateSemanticTag):
    tag_name = "currentDepartureDate"


class EventEndDate(DateSemanticTag):
    tag_name = "eventEndDate"


class EventStartDate(DateSemanticTag):
    tag_name = "eventStartDate"


class OriginalArrivalDate(DateSemanticTag):
    tag_name = "originalArrivalDate"


class OriginalBoardingDate(DateSemanticTag):
    tag_name = "originalBoardingDate"


class OriginalDepartureDate(DateSemanticTag):
    tag_name = "originalDepartureDate"


# Structured tags

class ArtistIds(StringListSemanticTag):
    tag_name = "artistIDs"


class PerformerNames(StringListSemanticTag):
    tag_name = "performerNames"


class Balance(CurrencyAmountSemanticTag):
    tag_name = "balance"


class TotalPrice(CurrencyAmountSemanticTag):
    tag_name = "totalPrice"


class DepartureLocation(LocationSemanticTag):
    tag_name = "departureLocation"


class DestinationLocation(LocationSemanticTag):
    tag_name = "destinationLocation"


class VenueLocation(LocationSemanticTag):
    tag_name = "venueLocation"


class PassengerName(PersonNameSemanticTag):
    tag_name = "passengerName"


class SemanticTags:
    """Ordered set of semantic tags attached to a pass or to a single field."""

    def __init__(self, tags: Optional[List[SemanticTag]] = None):
        self._tags: List[SemanticTag] = list(tags or [])

    def add(self, tag: SemanticTag) -> "SemanticTags":
        self._tags.append(tag)
        return self

    def write(self, writer: JsonWriter) -> None:
        """Write the "semantics" property; nothing is written when the set is empty."""
        if not self._tags:
            return

        writer.write_property_name("semantics")
        writer.write_start_object()
        for tag in self._tags:
            tag.write(writer)
        writer.write_end_object()

    def __iter__(self) -> Iterator[SemanticTag]:
        return iter(self._tags)

    def __len__(self) -> int:
        return len(self._tags)

    def __bool__(self) -> bool:
        return bool(self._tags)


# Lookup used when loading tags from a pass description
TAG_TYPES: Dict[str, type] = {
    cls.tag_name: cls
    for cls in (
        AirlineCode, AwayTeamAbbreviation, AwayTeamLocation, AwayTeamName,
        BoardingGroup, BoardingSequenceNumber, CarNumber, ConfirmationNumber,
        DepartureAirportCode, DepartureAirportName, DepartureGate,
        DepartureLocationDescription, DeparturePlatform, DepartureStationName,
        DepartureTerminal, DestinationAirportCode, DestinationAirportName,
        DestinationGate, DestinationLocationDescription, DestinationPlatform,
        DestinationStationName, DestinationTerminal, EventName, EventType,
        FlightCode, GenreName, HomeTeamAbbreviation, HomeTeamLocation,
        HomeTeamName, LeagueAbbreviation, LeagueName, MembershipProgramName,
        MembershipProgramNumber, PriorityStatus, SecurityScreening, SportName,
        TransitProvider, TransitStatus, TransitStatusReason, VehicleName,
        VehicleNumber, VehicleType, VenueEntrance, VenueName, VenuePhoneNumber,
        VenueRoom, Duration, FlightNumber, Silenced, CurrentArrivalDate,
        CurrentBoardingDate, CurrentDepartureDate, EventEndDate, EventStartDate,
        OriginalArrivalDate, OriginalBoardingDate, OriginalDepartureDate,
        ArtistIds, PerformerNames, Balance, TotalPrice, DepartureLocation,
        DestinationLocation, VenueLocation, PassengerName, Seats, WifiAccess,
    )
}
