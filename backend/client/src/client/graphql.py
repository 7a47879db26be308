"""GraphQL documents used by the client sections."""

HOST_LISTING = """
mutation HostListing($input: HostListingInput!) {
  hostListing(input: $input) {
    id
  }
}
"""

CONNECT_STRIPE = """
mutation ConnectStripe($input: ConnectStripeInput!) {
  connectStripe(input: $input) {
    hasWallet
  }
}
"""

DISCONNECT_STRIPE = """
mutation DisconnectStripe {
  disconnectStripe {
    hasWallet
  }
}
"""

USER = """
query User($id: ID!, $bookingsPage: Int!, $listingsPage: Int!, $limit: Int!) {
  user(id: $id) {
    id
    name
    avatar
    contact
    hasWallet
    income
    bookings(limit: $limit, page: $bookingsPage) {
      total
      result {
        id
        listing {
          id
          title
          image
          address
          price
          numOfGuests
        }
        checkIn
        checkOut
      }
    }
    listings(limit: $limit, page: $listingsPage) {
      total
      result {
        id
        title
        image
        address
        price
        numOfGuests
      }
    }
  }
}
"""
